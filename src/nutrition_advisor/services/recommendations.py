"""Rule-based "what to eat next" suggestions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nutrition_advisor.domain.nutrition import NutritionRecord
from nutrition_advisor.domain.recommendations import (
    RecommendationRule,
    Suggestion,
    SuggestionTopic,
)

DEFAULT_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule(SuggestionTopic.IRON, lambda r: r.minerals.iron, 5),
    RecommendationRule(SuggestionTopic.VITAMIN_C, lambda r: r.vitamins.vitamin_c, 30),
    RecommendationRule(SuggestionTopic.PROTEIN, lambda r: r.protein, 15),
    RecommendationRule(SuggestionTopic.CALCIUM, lambda r: r.minerals.calcium, 100),
    RecommendationRule(SuggestionTopic.VITAMIN_A, lambda r: r.vitamins.vitamin_a, 300),
    RecommendationRule(SuggestionTopic.VITAMIN_D, lambda r: r.vitamins.vitamin_d, 2),
)

DEFAULT_CONTENT: Mapping[SuggestionTopic, Suggestion] = MappingProxyType(
    {
        SuggestionTopic.IRON: Suggestion(
            name="시금치",
            nutrient_summary="철분, 비타민A",
            description="철분이 부족합니다. 시금치를 추가로 섭취하세요.",
            icon="🥬",
            food_list=("시금치", "브로콜리", "콩", "쇠고기", "달걀"),
            recipes=("시금치나물", "시금치된장국"),
        ),
        SuggestionTopic.VITAMIN_C: Suggestion(
            name="오렌지",
            nutrient_summary="비타민C",
            description="비타민C 섭취를 늘려보세요.",
            icon="🍊",
            food_list=("오렌지", "레몬", "키위", "딸기", "파프리카"),
            recipes=("키위 요거트볼", "파프리카 샐러드"),
        ),
        SuggestionTopic.PROTEIN: Suggestion(
            name="연어",
            nutrient_summary="오메가3, 단백질",
            description="고품질 단백질과 오메가3를 섭취하세요.",
            icon="🐟",
            food_list=("연어", "닭가슴살", "계란", "두부", "콩"),
            recipes=("연어 스테이크", "두부 부침"),
        ),
        SuggestionTopic.CALCIUM: Suggestion(
            name="우유",
            nutrient_summary="칼슘, 단백질",
            description="칼슘 섭취를 늘려보세요.",
            icon="🥛",
            food_list=("우유", "요거트", "치즈", "두부", "브로콜리"),
            recipes=("그릭요거트 스무디",),
        ),
        SuggestionTopic.VITAMIN_A: Suggestion(
            name="당근",
            nutrient_summary="비타민A",
            description="비타민A 섭취를 늘려보세요.",
            icon="🥕",
            food_list=("당근", "고구마", "시금치", "브로콜리", "달걀노른자"),
            recipes=("당근 라페", "군고구마"),
        ),
        SuggestionTopic.VITAMIN_D: Suggestion(
            name="연어",
            nutrient_summary="비타민D",
            description="비타민D 섭취를 늘려보세요.",
            icon="🐟",
            food_list=("연어", "고등어", "달걀노른자", "우유", "버섯"),
            recipes=("고등어 구이", "버섯 계란찜"),
        ),
        SuggestionTopic.DEFAULT: Suggestion(
            name="견과류",
            nutrient_summary="불포화지방, 단백질",
            description="건강한 지방과 단백질을 섭취하세요.",
            icon="🥜",
            food_list=("아몬드", "호두", "땅콩", "피스타치오", "캐슈넛"),
        ),
        SuggestionTopic.MANUAL_ENTRY: Suggestion(
            name="음식명 직접 입력",
            nutrient_summary="수동 입력",
            description="이미지를 분석할 수 없습니다. 음식명을 직접 입력해주세요.",
            icon="📝",
            food_list=("김치찌개", "샐러드", "닭가슴살", "밥"),
        ),
    }
)


@dataclass(frozen=True)
class RecommendationEngine:
    """Evaluate deficiency rules in order and collect their suggestions.

    Every firing rule contributes one entry; when none fire, the single
    default suggestion is returned.
    """

    rules: tuple[RecommendationRule, ...] = DEFAULT_RULES
    content: Mapping[SuggestionTopic, Suggestion] = field(
        default_factory=lambda: DEFAULT_CONTENT
    )

    def recommend(self, record: NutritionRecord) -> list[Suggestion]:
        """Return suggestions for the nutrients ``record`` falls short on."""
        suggestions = [
            self.content[rule.topic] for rule in self.rules if rule.fires(record)
        ]
        if not suggestions:
            suggestions.append(self.content[SuggestionTopic.DEFAULT])
        return suggestions

    def manual_entry(self) -> list[Suggestion]:
        """Return the suggestion asking the user to type a food name."""
        return [self.content[SuggestionTopic.MANUAL_ENTRY]]
