from __future__ import annotations

import re
from dataclasses import dataclass, field

from app.core.config.scoring import get_scoring_value
from app.normalize.resume_corpus import experience_descriptions
from app.normalize.utils import has_structured_lines, is_valid_email
from app.schemas.analysis import FormattingCheck, FormattingIssue, IssueSeverity
from app.schemas.resume import ResumeRecord

_DIGIT_RE = re.compile(r"\d")


@dataclass
class _Findings:
    deductions: int = 0
    issues: list[FormattingIssue] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def fail(self, deduction_key: str, default: int, message: str, severity: IssueSeverity, suggestion: str) -> None:
        self.deductions += int(get_scoring_value(f"formatting.deductions.{deduction_key}", default))
        self.issues.append(FormattingIssue(message=message, severity=severity))
        self.suggestions.append(suggestion)

    def passed(self, strength: str) -> None:
        self.strengths.append(strength)


def _check_sections(resume: ResumeRecord, findings: _Findings) -> None:
    sections = (
        ("Experience", resume.experience),
        ("Education", resume.education),
        ("Skills", resume.skills),
        ("Projects", resume.projects),
    )
    missing = [name for name, entries in sections if not entries]
    if missing:
        findings.fail(
            "missing_sections",
            15,
            f"Missing standard sections: {', '.join(missing)}",
            "warning",
            f"Add {', '.join(missing)} with standard headings so ATS parsers can find them",
        )
    else:
        findings.passed("All standard sections present (Experience, Education, Skills, Projects)")


def _check_contact(resume: ResumeRecord, findings: _Findings) -> None:
    info = resume.personal_info
    missing = [label for label, value in (("email", info.email), ("phone", info.phone)) if not value.strip()]
    if missing:
        findings.fail(
            "incomplete_contact",
            20,
            f"Contact information incomplete: missing {' and '.join(missing)}",
            "critical",
            "Include both an email address and a phone number in the header",
        )
    else:
        findings.passed("Complete contact information (email and phone)")


def _check_email_format(resume: ResumeRecord, findings: _Findings) -> None:
    email = resume.personal_info.email.strip()
    if not email:
        return
    if is_valid_email(email):
        findings.passed("Email address is well formed")
    else:
        findings.fail(
            "invalid_email",
            10,
            "Invalid email format",
            "warning",
            "Use a professional email address",
        )


def _check_bullets(descriptions: list[str], findings: _Findings) -> None:
    if any(has_structured_lines(description) for description in descriptions):
        findings.passed("Experience descriptions use bullet points")
    else:
        findings.fail(
            "no_bullets",
            5,
            "Experience descriptions are not broken into bullet points",
            "info",
            "Break each role description into short bullet points",
        )


def _check_quantified(descriptions: list[str], findings: _Findings) -> None:
    if any(_DIGIT_RE.search(description) for description in descriptions):
        findings.passed("Experience includes quantified achievements")
    else:
        findings.fail(
            "no_quantified_achievements",
            10,
            "No quantified achievements in experience descriptions",
            "info",
            "Add numbers, percentages or amounts that show the impact of your work",
        )


def check_formatting(resume: ResumeRecord) -> FormattingCheck:
    findings = _Findings()
    descriptions = experience_descriptions(resume)

    _check_sections(resume, findings)
    _check_contact(resume, findings)
    _check_email_format(resume, findings)
    _check_bullets(descriptions, findings)
    _check_quantified(descriptions, findings)

    return FormattingCheck(
        score=max(0, 100 - findings.deductions),
        issues=findings.issues,
        strengths=findings.strengths,
        suggestions=findings.suggestions,
    )
