from pydantic import BaseModel, Field, field_validator

from src.components.popup import PopupConfig
from src.components.sharing import SUPPORTED_TARGETS


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class SharingRules(BaseModel):
    enabled: bool = True
    platforms: list[str] = Field(default_factory=lambda: list(SUPPORTED_TARGETS))

    @field_validator("platforms")
    @classmethod
    def check_platforms(cls, value: list[str]) -> list[str]:
        unknown = [p for p in value if p not in SUPPORTED_TARGETS]
        if unknown:
            raise ValueError(f"unknown share platforms: {unknown}")
        return value

class PopupRules(BaseModel):
    width: int = Field(default=600, gt=0)
    height: int = Field(default=600, gt=0)
    window_name: str = "_blank"
    marker_attribute: str = Field(default="open-win", min_length=1)

    def to_config(self) -> PopupConfig:
        return PopupConfig(
            width=self.width,
            height=self.height,
            window_name=self.window_name,
            marker_attribute=self.marker_attribute,
        )

class Rules(BaseModel):
    project: ProjectRules
    sharing: SharingRules = Field(default_factory=SharingRules)
    popup: PopupRules = Field(default_factory=PopupRules)
