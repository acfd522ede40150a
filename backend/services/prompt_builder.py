"""All prompt templates for Gemini API calls."""

from models.schemas.profiles import Employee, Project

_SCORING_RUBRIC = """SCORING RUBRIC (follow strictly):
- perfect (80-100): has at least 80% of the required skills directly
- good (60-79): has at least 60% of the required skills and can learn the rest
- partial (40-59): has some required skills but significant gaps exist
- stretch (30-39): has transferable skills but would need substantial learning"""


def _describe_employee(employee: Employee) -> str:
    return f"""Employee ID: {employee.id}
Name: {employee.name}
Title: {employee.title}
Department: {employee.department}
Experience Level: {employee.experience_level}
Skills: {', '.join(employee.skills) or 'None listed'}
Bio: {employee.bio or 'No bio provided'}"""


def _describe_project(project: Project) -> str:
    return f"""Project ID: {project.id}
Title: {project.title}
Description: {project.description}
Required Skills: {', '.join(project.required_skills) or 'None specified'}
Priority: {project.priority or 'Not specified'}
Status: {project.status or 'Not specified'}
Estimated Duration: {project.estimated_duration or 'Not specified'}
Budget: {project.budget or 'Not specified'}"""


def build_project_recommendation_prompt(employee: Employee, projects: list[Project]) -> str:
    """Rank projects for one employee."""
    projects_text = "\n\n".join(_describe_project(p) for p in projects)

    return f"""You are an expert career advisor and project matching specialist.

Analyze the employee profile against the available projects and recommend the best fits.

{_SCORING_RUBRIC}

Consider direct skill matches, transferable skills, learning potential based on
experience level, department synergies and project complexity.

EMPLOYEE:
---
{_describe_employee(employee)}
---

AVAILABLE PROJECTS:
---
{projects_text}
---

Only include projects with a compatibility_score of 30 or more, ranked by score descending.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "recommendations": [
    {{
      "project_id": <integer, one of the project IDs above>,
      "compatibility_score": <integer 0-100>,
      "matching_skills": [<required skills the employee has>],
      "missing_skills": [<required skills the employee lacks>],
      "reasoning": "<1-3 sentences explaining the match>",
      "recommendation_level": "perfect" | "good" | "partial" | "stretch"
    }}
  ]
}}"""


def build_employee_recommendation_prompt(project: Project, employees: list[Employee]) -> str:
    """Rank employees for one project."""
    employees_text = "\n\n".join(_describe_employee(e) for e in employees)

    return f"""You are an expert technical recruiter and team building specialist.

Analyze the project requirements against the available employees and recommend the best candidates.

{_SCORING_RUBRIC}

Consider direct skill alignment, experience level versus project complexity,
department knowledge and unique skills that add unexpected value.

PROJECT:
---
{_describe_project(project)}
---

AVAILABLE EMPLOYEES:
---
{employees_text}
---

Only include employees with a compatibility_score of 30 or more, ranked by score descending.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "recommendations": [
    {{
      "employee_id": <integer, one of the employee IDs above>,
      "compatibility_score": <integer 0-100>,
      "matching_skills": [<required skills the employee has>],
      "additional_value": [<other employee skills useful to the project>],
      "reasoning": "<1-3 sentences explaining the employee's value>",
      "recommendation_level": "perfect" | "good" | "partial" | "stretch"
    }}
  ]
}}"""


def build_skill_gap_prompt(employee: Employee, project: Project) -> str:
    """Skill gap and learning path for one employee and one target project."""
    return f"""You are an expert learning and development advisor.

Analyze the skill gap between the employee and the target project and create a
personalized learning path, ordered from foundational to advanced skills and
adapted to the employee's experience level.

EMPLOYEE:
---
{_describe_employee(employee)}
---

TARGET PROJECT:
---
{_describe_project(project)}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "current_skills": [<employee skills>],
  "required_skills": [<project required skills>],
  "matching_skills": [<required skills the employee already has>],
  "missing_skills": [<required skills the employee lacks>],
  "learning_path": [<ordered steps>],
  "time_estimate": "<realistic time needed to acquire the missing skills>",
  "difficulty": "easy" | "moderate" | "challenging" | "advanced"
}}"""
