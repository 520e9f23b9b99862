from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ValidatorKind(str, Enum):
    architecture = "architecture"
    brief = "brief"


class ValidateRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    markdown: str
    source: str = Field(default="<request>", min_length=1, max_length=500)


class HealthResponse(BaseModel):
    status: str
    validators: list[ValidatorKind]


class CheckResultModel(BaseModel):
    name: str
    category: str
    required: bool
    outcome: str
    detected: list[str] = Field(default_factory=list)


class TallyModel(BaseModel):
    passed: int
    failed: int
    warned: int
    total: int
    pass_rate: int = Field(ge=0, le=100)


class CoverageModel(BaseModel):
    found: list[str]
    missing: list[str]
    total: int
    completeness: int = Field(ge=0, le=100)


class PlaceholderLine(BaseModel):
    line: int
    text: str


class PlaceholdersModel(BaseModel):
    count: int
    tokens: list[str]
    lines: list[PlaceholderLine]


class AdvisoryModel(BaseModel):
    name: str
    passed: bool
    message: str


class ValidateResponse(BaseModel):
    request_id: str
    kind: ValidatorKind
    source: str
    verdict: str
    passed: bool
    exit_code: int
    results: list[CheckResultModel]
    tally: TallyModel | None = None
    coverage: CoverageModel | None = None
    placeholders: PlaceholdersModel | None = None
    advisories: list[AdvisoryModel] | None = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    request_id: str
