import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas.analysis import (  # noqa: E402
    AIInsights,
    ContentEnhancement,
    FormattingCheck,
    FormattingIssue,
    HardSkillsAnalysis,
    KeywordMatch,
    Recommendation,
    ScoredFeedback,
)
from app.schemas.resume import ResumeRecord  # noqa: E402
from app.services.result_normalizer import fallback_ai_insights  # noqa: E402
from app.services.scoring import (  # noqa: E402
    aggregate,
    ai_recommendations,
    build_recommendations,
    content_score,
    keyword_score,
    merge_recommendations,
)


def _matches(*frequencies: int, importance: str = "low") -> list[KeywordMatch]:
    return [
        KeywordMatch(keyword=f"term{index}", frequency=frequency, importance=importance)
        for index, frequency in enumerate(frequencies)
    ]


def _rec(priority: str, title: str) -> Recommendation:
    return Recommendation(priority=priority, category="content", title=title, description="", action="")


class ComponentScoreTests(unittest.TestCase):
    def test_keyword_score_is_found_ratio(self):
        self.assertEqual(keyword_score(_matches(1, 0, 3, 0)), 50.0)
        self.assertEqual(keyword_score([]), 0.0)

    def test_content_score_formula(self):
        content = ContentEnhancement(quantified_achievements=2, action_verbs_used=3, generic_phrases_used=1)
        self.assertEqual(content_score(content), 75)

    def test_content_score_is_clamped(self):
        self.assertEqual(content_score(ContentEnhancement(generic_phrases_used=9)), 0)
        self.assertEqual(content_score(ContentEnhancement(quantified_achievements=20)), 100)


class AggregateTests(unittest.TestCase):
    def test_weighted_overall_score(self):
        result = aggregate(
            _matches(1, 0),
            HardSkillsAnalysis(required_skills=["AWS", "Python"]),
            FormattingCheck(score=80),
            ContentEnhancement(),
        )
        # 0.4 * 50 + 0.3 * 0 + 0.2 * 80 + 0.1 * 50
        self.assertEqual(result.overall_score, 41)

    def test_perfect_inputs_reach_hundred(self):
        result = aggregate(
            _matches(2, 1),
            HardSkillsAnalysis(required_skills=["Python"], found_skills=["Python"]),
            FormattingCheck(score=100),
            ContentEnhancement(quantified_achievements=5),
        )
        self.assertEqual(result.overall_score, 100)

    def test_empty_inputs_use_midpoint(self):
        result = aggregate([], HardSkillsAnalysis(), FormattingCheck(score=50), ContentEnhancement(), ResumeRecord())
        self.assertEqual(result.overall_score, 50)
        titles = [rec.title for rec in result.recommendations]
        self.assertEqual(titles[:2], ["Add More Skills", "Add Work Experience"])

    def test_heuristic_recommendations_are_capped(self):
        result = aggregate(
            _matches(0, importance="high"),
            HardSkillsAnalysis(required_skills=["AWS"], missing_critical_skills=["AWS"]),
            FormattingCheck(score=80, issues=[FormattingIssue(message="Contact information incomplete", severity="critical")]),
            ContentEnhancement(generic_phrases_used=1, generic_phrases=["team player"]),
            ResumeRecord(),
        )
        self.assertEqual(len(result.recommendations), 5)
        self.assertEqual(len(result.candidate_recommendations), 8)


class RecommendationLadderTests(unittest.TestCase):
    def test_ladder_order(self):
        ladder = build_recommendations(
            _matches(0, importance="high"),
            HardSkillsAnalysis(required_skills=["AWS"], missing_critical_skills=["AWS"]),
            FormattingCheck(issues=[FormattingIssue(message="Contact information incomplete", severity="critical")]),
            ContentEnhancement(quantified_achievements=5, action_verbs_used=5),
        )
        self.assertEqual(
            [rec.title for rec in ladder],
            ["Add Missing Critical Skills", "Fix Critical Formatting Issues", "Add Missing High-Priority Keywords"],
        )
        self.assertIn("AWS", ladder[0].description)

    def test_strong_resume_gets_no_recommendations(self):
        ladder = build_recommendations(
            _matches(1, importance="high"),
            HardSkillsAnalysis(),
            FormattingCheck(),
            ContentEnhancement(quantified_achievements=4, action_verbs_used=6),
        )
        self.assertEqual(ladder, [])


class AIRecommendationTests(unittest.TestCase):
    def test_fallback_insights_add_nothing(self):
        self.assertEqual(ai_recommendations(fallback_ai_insights()), [])

    def test_insights_map_to_recommendations(self):
        insights = AIInsights(
            critical_gaps=["Kubernetes", "Terraform", "Go"],
            industry_alignment=ScoredFeedback(score=55, feedback="Little fintech exposure"),
            content_quality=ScoredFeedback(score=85, feedback="Clear"),
            tailored_suggestions=["Lead with the payments migration"],
        )
        recommendations = ai_recommendations(insights)
        self.assertEqual(
            [rec.title for rec in recommendations],
            ["Address Critical Skill Gaps", "Improve Industry Alignment", "AI-Suggested Improvements"],
        )
        self.assertEqual(recommendations[0].action, "Focus on: Kubernetes, Terraform")
        self.assertEqual(recommendations[1].description, "Little fintech exposure")

    def test_merge_orders_by_priority_and_caps(self):
        heuristic = [_rec("medium", "m1"), _rec("low", "l1"), _rec("high", "h1")]
        additional = [_rec("high", "h2"), _rec("low", "l2")]
        merged = merge_recommendations(heuristic, additional)
        self.assertEqual([rec.title for rec in merged], ["h1", "h2", "m1", "l1", "l2"])
        self.assertEqual(len(merge_recommendations(heuristic * 3, additional * 3)), 8)


if __name__ == "__main__":
    unittest.main()
