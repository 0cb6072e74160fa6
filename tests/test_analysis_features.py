import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_checker.analysis.features import (  # noqa: E402
    count_sentences,
    count_vocabulary_matches,
    extract_features,
    find_section_headers,
    has_contact_info,
    has_metrics,
)
from resume_checker.analysis.vocabulary import ACTION_VERBS  # noqa: E402

FILLER = ("daily", "tasks", "with", "our", "group", "on", "time")


def filler_words(count: int) -> str:
    return " ".join(FILLER[i % len(FILLER)] for i in range(count))


class ContactDetectionTests(unittest.TestCase):
    def test_phone_formats_with_email(self):
        for phone in ("555-123-4567", "555.123.4567", "555 123 4567", "5551234567"):
            with self.subTest(phone=phone):
                self.assertTrue(has_contact_info(f"jane.doe@example.com call {phone}"))

    def test_email_without_phone_is_not_contact(self):
        self.assertFalse(has_contact_info("jane.doe@example.com only"))

    def test_phone_without_email_is_not_contact(self):
        self.assertFalse(has_contact_info("call 555-123-4567 anytime"))

    def test_longer_digit_run_is_not_a_phone(self):
        self.assertFalse(has_contact_info("jane.doe@example.com id 555123456789"))

    def test_line_breaks_and_tabs_do_not_join_a_phone(self):
        self.assertFalse(has_contact_info("jane.doe@example.com\n555\n123\n4567"))
        self.assertFalse(has_contact_info("jane.doe@example.com\t555\t123\t4567"))


class MetricsDetectionTests(unittest.TestCase):
    def test_quantified_patterns(self):
        samples = (
            "grew sales 25% year over year",
            "closed a $500 deal",
            "drove 3M revenue",
            "delivered 15 growth points",
            "found 40 savings",
            "achieved 2k cost reduction",
        )
        for sample in samples:
            with self.subTest(sample=sample):
                self.assertTrue(has_metrics(sample))

    def test_plain_numbers_are_not_metrics(self):
        self.assertFalse(has_metrics("worked 5 years in 3 teams"))

    def test_repeated_calls_are_stateless(self):
        text = "Increased revenue 25% in one quarter"
        self.assertEqual([has_metrics(text) for _ in range(4)], [True, True, True, True])


class TextCountingTests(unittest.TestCase):
    def test_sentence_fragments(self):
        self.assertEqual(count_sentences("One. Two! Three?"), 3)
        self.assertEqual(count_sentences("Ends with many marks!!! Then more..."), 2)

    def test_sentence_count_is_at_least_one(self):
        self.assertEqual(count_sentences("no punctuation here"), 1)
        self.assertEqual(count_sentences("..."), 1)

    def test_vocabulary_counts_distinct_entries(self):
        lowered = "led the team. led again. built tools and designed apis"
        self.assertEqual(count_vocabulary_matches(lowered, ACTION_VERBS), 3)

    def test_section_headers_are_distinct_and_case_insensitive(self):
        lowered = "EXPERIENCE\nmore experience\nSkills\n".lower()
        self.assertEqual(find_section_headers(lowered), ("experience", "skills"))


class ExtractFeaturesTests(unittest.TestCase):
    def test_blank_and_short_text_short_circuit(self):
        self.assertIsNone(extract_features(""))
        self.assertIsNone(extract_features("   \n\t "))
        self.assertIsNone(extract_features(filler_words(49)))

    def test_fifty_words_are_analysed(self):
        features = extract_features(filler_words(50))
        self.assertIsNotNone(features)
        self.assertEqual(features.word_count, 50)
        self.assertEqual(features.sentence_count, 1)
        self.assertFalse(features.has_line_breaks)

    def test_full_feature_set(self):
        text = (
            "Jane Doe\n"
            "jane.doe@example.com | 555-123-4567\n"
            "Professional Summary\n"
            "Led platform work and built tooling. Increased revenue 20% in a year.\n"
            "EXPERIENCE\n"
            "Designed services with leadership and communication.\n"
            "EDUCATION\n"
            f"{filler_words(40)}"
        )
        features = extract_features(text)
        self.assertIsNotNone(features)
        self.assertTrue(features.has_contact_info)
        self.assertTrue(features.has_summary)
        self.assertTrue(features.has_metrics)
        self.assertEqual(features.action_verb_count, 4)
        self.assertEqual(features.keyword_matches, 4)
        self.assertEqual(features.section_headers, ("experience", "education"))
        self.assertTrue(features.has_line_breaks)

    def test_average_word_length_samples_first_500_words(self):
        text = " ".join(["abcd"] * 500 + ["abcdefghij"] * 100)
        features = extract_features(text)
        self.assertEqual(features.word_count, 600)
        self.assertAlmostEqual(features.average_word_length, 4.0)


if __name__ == "__main__":
    unittest.main()
