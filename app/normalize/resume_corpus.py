from __future__ import annotations

from app.schemas.resume import ResumeRecord

from .utils import join_fields


def build_resume_corpus(resume: ResumeRecord) -> str:
    """Flatten every meaningful free-text field of the resume into one search corpus.

    Empty fields are skipped so no placeholder tokens leak into keyword matching.
    """
    info = resume.personal_info
    sections = [
        join_fields(
            info.full_name,
            info.email,
            info.phone,
            info.location,
            info.linked_in,
            info.portfolio,
        )
    ]
    sections.extend(join_fields(exp.position, exp.company, exp.description) for exp in resume.experience)
    sections.extend(join_fields(edu.degree, edu.field, edu.institution, edu.gpa) for edu in resume.education)
    sections.extend(join_fields(skill.name, skill.level) for skill in resume.skills)
    sections.extend(
        join_fields(project.name, project.description, project.technologies, project.url)
        for project in resume.projects
    )
    return " ".join(section for section in sections if section)


def experience_descriptions(resume: ResumeRecord) -> list[str]:
    return [exp.description for exp in resume.experience if exp.description.strip()]
