import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_checker.analysis.features import FeatureSet  # noqa: E402
from resume_checker.analysis.feedback import FeedbackBuilder, generate_feedback  # noqa: E402
from resume_checker.analysis.scoring import ScoreSet  # noqa: E402


def make_features(**overrides) -> FeatureSet:
    values = {
        "word_count": 600,
        "has_contact_info": True,
        "has_summary": True,
        "has_metrics": True,
        "action_verb_count": 12,
        "sentence_count": 40,
        "keyword_matches": 8,
        "average_word_length": 5.0,
        "has_line_breaks": True,
        "section_headers": ("experience", "education"),
    }
    values.update(overrides)
    return FeatureSet(**values)


def make_scores(**overrides) -> ScoreSet:
    values = {"readability": 80, "ats": 85, "impact": 75, "formatting": 85, "overall": 81}
    values.update(overrides)
    return ScoreSet(**values)


class FeedbackBuilderTests(unittest.TestCase):
    def test_issue_adds_paired_suggestion(self):
        builder = FeedbackBuilder()
        builder.add_issue("problem", "fix it")
        builder.add_suggestion("keep going")
        feedback = builder.build()
        self.assertEqual(feedback.issues, ("problem",))
        self.assertEqual(feedback.suggestions, ("fix it", "keep going"))


class GenerateFeedbackTests(unittest.TestCase):
    def test_strong_resume_order(self):
        feedback = generate_feedback(make_features(), make_scores())
        self.assertEqual(feedback.issues, ())
        self.assertEqual(
            list(feedback.suggestions),
            [
                "✓ Contact information is properly included",
                "✓ Professional summary included",
                "✓ Excellent use of action verbs (12 found)",
                "✓ Strong use of quantifiable metrics",
                "✓ Good resume length (600 words)",
                "✓ Excellent readability (score: 80)",
                "✓ Good ATS compatibility (score: 85)",
                "✓ Strong achievement-focused content (score: 75)",
                "🏆 Your resume is excellent! You're ready to apply to top positions",
            ],
        )

    def test_missing_basics_order(self):
        features = make_features(
            has_contact_info=False,
            has_summary=False,
            has_metrics=False,
            action_verb_count=0,
            word_count=80,
            sentence_count=8,
        )
        scores = make_scores(readability=35, ats=45, impact=40, formatting=50, overall=43)
        feedback = generate_feedback(features, scores)
        self.assertEqual(
            list(feedback.issues),
            [
                "Missing contact information",
                "No professional summary or objective",
                "No action verbs found",
                "Missing quantifiable results",
                "Resume is critically short (80 words)",
                "Very poor readability (score: 35)",
                "Poor ATS compatibility (score: 45)",
                "Low impact score (score: 40)",
            ],
        )
        self.assertEqual(len(feedback.suggestions), len(feedback.issues))
        self.assertTrue(feedback.suggestions[0].startswith("📧"))
        self.assertIn("Example:", feedback.suggestions[1])

    def test_action_verb_tiers(self):
        cases = {
            3: ("Low number of action verbs", "💪 Increase action verbs from 3 to at least 10."),
            7: (None, "✓ Good use of action verbs (7 found)"),
            10: (None, "✓ Excellent use of action verbs (10 found)"),
        }
        for count, (issue, suggestion) in cases.items():
            with self.subTest(count=count):
                feedback = generate_feedback(make_features(action_verb_count=count), make_scores())
                if issue:
                    self.assertIn(issue, feedback.issues)
                else:
                    self.assertEqual(feedback.issues, ())
                self.assertTrue(any(s.startswith(suggestion) for s in feedback.suggestions))

    def test_word_count_tiers(self):
        cases = {
            150: "Resume appears too brief (150 words)",
            1000: None,
            1200: "Resume may be slightly long (1200 words)",
            1501: "Resume is too long (1501 words)",
        }
        for words, issue in cases.items():
            with self.subTest(words=words):
                feedback = generate_feedback(make_features(word_count=words, sentence_count=100), make_scores())
                if issue:
                    self.assertEqual(feedback.issues, (issue,))
                else:
                    self.assertIn(f"✓ Good resume length ({words} words)", feedback.suggestions)

    def test_readability_and_ats_middle_bands(self):
        feedback = generate_feedback(make_features(), make_scores(readability=45, ats=60))
        self.assertEqual(
            feedback.issues,
            ("Poor readability (score: 45)", "Moderate ATS compatibility (score: 60)"),
        )
        feedback = generate_feedback(make_features(), make_scores(readability=55))
        self.assertEqual(feedback.issues, ("Moderate readability (score: 55)",))
        feedback = generate_feedback(make_features(), make_scores(readability=75))
        self.assertIn("✓ Good readability (score: 75)", feedback.suggestions)

    def test_middle_impact_is_suggestion_only(self):
        feedback = generate_feedback(make_features(), make_scores(impact=60))
        self.assertEqual(feedback.issues, ())
        self.assertTrue(any(s.startswith("💡 Enhance impact") for s in feedback.suggestions))

    def test_long_sentence_pro_tip(self):
        tip = "⚡ Pro Tip"
        with_tip = generate_feedback(make_features(word_count=255, sentence_count=10), make_scores())
        without_tip = generate_feedback(make_features(word_count=254, sentence_count=10), make_scores())
        self.assertTrue(any(s.startswith(tip) for s in with_tip.suggestions))
        self.assertFalse(any(s.startswith(tip) for s in without_tip.suggestions))

    def test_closing_remark_bands(self):
        cases = {80: "🏆", 79: "👍", 70: "👍", 60: "📋"}
        for overall, marker in cases.items():
            with self.subTest(overall=overall):
                feedback = generate_feedback(make_features(), make_scores(overall=overall))
                self.assertTrue(feedback.suggestions[-1].startswith(marker))

    def test_no_closing_remark_below_sixty(self):
        feedback = generate_feedback(make_features(), make_scores(overall=59))
        self.assertTrue(feedback.suggestions[-1].startswith("✓ Strong achievement-focused content"))


if __name__ == "__main__":
    unittest.main()
