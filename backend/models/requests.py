from pydantic import BaseModel, Field

from models.schemas.profiles import Employee, Project


class ProjectRecommendationRequest(BaseModel):
    employee: Employee
    projects: list[Project] = Field(default_factory=list, description="Candidate projects to rank")


class EmployeeRecommendationRequest(BaseModel):
    project: Project
    employees: list[Employee] = Field(default_factory=list, description="Candidate employees to rank")


class CompatibilityRequest(BaseModel):
    employee: Employee
    project: Project


class SkillGapRequest(BaseModel):
    employee: Employee
    project: Project
