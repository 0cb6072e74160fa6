"""Rule ladder that turns features and scores into issues and suggestions.

Rules run in a fixed order and each one appends to a shared
:class:`FeedbackBuilder`, so the output order depends only on the inputs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .features import FeatureSet
from .scoring import ScoreSet, round_half_up

LONG_SENTENCE_WORDS = 25


class Feedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


class FeedbackBuilder:
    def __init__(self) -> None:
        self._issues: list[str] = []
        self._suggestions: list[str] = []

    def add_issue(self, issue: str, suggestion: str) -> None:
        self._issues.append(issue)
        self._suggestions.append(suggestion)

    def add_suggestion(self, suggestion: str) -> None:
        self._suggestions.append(suggestion)

    def build(self) -> Feedback:
        return Feedback(issues=tuple(self._issues), suggestions=tuple(self._suggestions))


def _contact_rule(builder: FeedbackBuilder, features: FeatureSet) -> None:
    if not features.has_contact_info:
        builder.add_issue(
            "Missing contact information",
            "📧 Add your email and phone number at the top of your resume",
        )
    else:
        builder.add_suggestion("✓ Contact information is properly included")


def _summary_rule(builder: FeedbackBuilder, features: FeatureSet) -> None:
    if not features.has_summary:
        builder.add_issue(
            "No professional summary or objective",
            "📝 Write a 2-3 line professional summary with your key strengths and career goal. "
            'Example: "Results-driven professional with 5+ years experience in XYZ, '
            'proven track record of increasing productivity by 30%"',
        )
    else:
        builder.add_suggestion("✓ Professional summary included")


def _action_verb_rule(builder: FeedbackBuilder, features: FeatureSet) -> None:
    count = features.action_verb_count
    if count == 0:
        builder.add_issue(
            "No action verbs found",
            "💪 Start each bullet point with strong action verbs. "
            'Examples: "Managed 5-person team", "Developed new process", "Implemented solution"',
        )
    elif count < 5:
        builder.add_issue(
            "Low number of action verbs",
            f"💪 Increase action verbs from {count} to at least 10. "
            "Use: led, developed, implemented, designed, created, managed, improved, increased, reduced, achieved",
        )
    elif count < 10:
        builder.add_suggestion(f"✓ Good use of action verbs ({count} found)")
    else:
        builder.add_suggestion(f"✓ Excellent use of action verbs ({count} found)")


def _metrics_rule(builder: FeedbackBuilder, features: FeatureSet) -> None:
    if not features.has_metrics:
        builder.add_issue(
            "Missing quantifiable results",
            "📊 Add specific metrics to your achievements. "
            'Examples: "Increased sales by 25%", "Reduced costs by $50K", "Improved efficiency to 95%"',
        )
    else:
        builder.add_suggestion("✓ Strong use of quantifiable metrics")


def _word_count_rule(builder: FeedbackBuilder, features: FeatureSet) -> None:
    words = features.word_count
    if words < 100:
        builder.add_issue(
            f"Resume is critically short ({words} words)",
            "📄 Expand your resume to at least 200 words. Add more achievements, skills, and relevant details",
        )
    elif words < 200:
        builder.add_issue(
            f"Resume appears too brief ({words} words)",
            "📄 Expand to 200+ words by adding more accomplishments and key achievements in each role",
        )
    elif words > 1500:
        builder.add_issue(
            f"Resume is too long ({words} words)",
            "📄 Reduce to 500-1000 words max. Cut less relevant details and focus on recent, impactful achievements",
        )
    elif words > 1000:
        builder.add_issue(
            f"Resume may be slightly long ({words} words)",
            "📄 Consider trimming to 1000 words for better readability. Keep most impactful achievements",
        )
    else:
        builder.add_suggestion(f"✓ Good resume length ({words} words)")


def _readability_rule(builder: FeedbackBuilder, scores: ScoreSet) -> None:
    score = scores.readability
    if score < 40:
        builder.add_issue(
            f"Very poor readability (score: {score})",
            "🔤 Simplify your language. Use shorter sentences (15-20 words), active voice, and avoid jargon",
        )
    elif score < 50:
        builder.add_issue(
            f"Poor readability (score: {score})",
            "🔤 Improve readability by breaking long sentences into shorter ones and using simpler vocabulary",
        )
    elif score < 60:
        builder.add_issue(
            f"Moderate readability (score: {score})",
            "🔤 Consider simplifying some complex sentences for better readability",
        )
    elif score > 75:
        builder.add_suggestion(f"✓ Excellent readability (score: {score})")
    else:
        builder.add_suggestion(f"✓ Good readability (score: {score})")


def _ats_rule(builder: FeedbackBuilder, scores: ScoreSet) -> None:
    score = scores.ats
    if score < 50:
        builder.add_issue(
            f"Poor ATS compatibility (score: {score})",
            "🤖 Add standard section headers: EXPERIENCE, EDUCATION, SKILLS, CERTIFICATIONS. "
            "Use clean formatting without special characters",
        )
    elif score < 70:
        builder.add_issue(
            f"Moderate ATS compatibility (score: {score})",
            "🤖 Improve ATS score by using standard formatting, clear headers, "
            "and including all relevant keywords from job descriptions",
        )
    else:
        builder.add_suggestion(f"✓ Good ATS compatibility (score: {score})")


def _impact_rule(builder: FeedbackBuilder, scores: ScoreSet) -> None:
    score = scores.impact
    if score < 50:
        builder.add_issue(
            f"Low impact score (score: {score})",
            "⭐ Focus on achievements with measurable outcomes. "
            "Add context to each accomplishment. Include impact statements",
        )
    elif score < 70:
        builder.add_suggestion(
            "💡 Enhance impact by adding more quantifiable results and business outcomes to your achievements"
        )
    else:
        builder.add_suggestion(f"✓ Strong achievement-focused content (score: {score})")


def _line_length_tip(builder: FeedbackBuilder, features: FeatureSet) -> None:
    if features.word_count <= 0 or features.sentence_count <= 0:
        return
    if round_half_up(features.word_count / features.sentence_count) > LONG_SENTENCE_WORDS:
        builder.add_suggestion(
            "⚡ Pro Tip: Break up long bullet points into shorter, punchier statements "
            "(aim for 15-20 words per line)"
        )


def _closing_remark(builder: FeedbackBuilder, scores: ScoreSet) -> None:
    if scores.overall >= 80:
        builder.add_suggestion("🏆 Your resume is excellent! You're ready to apply to top positions")
    elif scores.overall >= 70:
        builder.add_suggestion("👍 Your resume is good! Minor improvements could make it even stronger")
    elif scores.overall >= 60:
        builder.add_suggestion("📋 Your resume needs some work. Focus on the suggestions above to improve")


def generate_feedback(features: FeatureSet, scores: ScoreSet) -> Feedback:
    builder = FeedbackBuilder()
    _contact_rule(builder, features)
    _summary_rule(builder, features)
    _action_verb_rule(builder, features)
    _metrics_rule(builder, features)
    _word_count_rule(builder, features)
    _readability_rule(builder, scores)
    _ats_rule(builder, scores)
    _impact_rule(builder, scores)
    _line_length_tip(builder, features)
    _closing_remark(builder, scores)
    return builder.build()
