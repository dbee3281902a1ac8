from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict

# Language name -> cumulative bytes. No canonical ordering.
LanguageTotals = Dict[str, int]

class Profile(BaseModel):
    """
    Immutable snapshot of a GitHub user profile for the lifetime of one request.
    Field names mirror the GitHub REST payload so the dashboard can read them as-is.
    """
    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="Unique GitHub login")
    name: Optional[str] = Field(None, description="Display name")
    avatar_url: str = Field("", description="Avatar image URL")
    html_url: Optional[str] = Field(None, description="Profile page URL")
    bio: Optional[str] = None
    followers: int = Field(0, ge=0, description="Follower count")
    public_repos: int = Field(0, ge=0, description="Public repository count")

class Repository(BaseModel):
    """Immutable view of a single public repository owned by the profile."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(0, description="GitHub numeric repository ID")
    name: str = Field(..., description="Name of the repository")
    fork: bool = Field(False, description="Whether the repository is a fork")
    size: int = Field(0, ge=0, description="Upstream-reported size")
    description: Optional[str] = None
    language: Optional[str] = Field(None, description="Primary language")
    stargazers_count: int = Field(0, ge=0, description="Total number of stargazers")
    html_url: str = ""

class AnalysisResult(BaseModel):
    """
    Response aggregate for one analysis.

    `repositories` is exactly the set the language totals and the score were
    computed from. Serialize with `by_alias=True` for the dashboard's keys.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    profile: Profile
    repositories: List[Repository] = Field(default_factory=list)
    languages_by_bytes: LanguageTotals = Field(default_factory=dict, alias="languagesByBytes")
    hireability_score: int = Field(..., ge=0, le=100, alias="hireabilityScore")
    ai_review: str = Field("", alias="aiReview")
    annual_activity: List[int] = Field(default_factory=list, alias="annualActivity")
