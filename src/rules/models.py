from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LoggingRules(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RedirectRules(BaseModel):
    enabled: bool = True
    # log every constructed redirect at INFO
    trace: bool = False
    allowed_status_codes: list[int] = Field(default_factory=lambda: [301, 302, 303, 307, 308])


class Rules(BaseModel):
    project: ProjectRules
    logging: LoggingRules = Field(default_factory=LoggingRules)
    redirects: RedirectRules = Field(default_factory=RedirectRules)
