from pydantic import BaseModel, ConfigDict, Field, model_validator


class WorkspaceCleanerSettings(BaseModel):
    """Immutable configuration of the suspended-workspace cleaner"""

    model_config = ConfigDict(frozen=True)

    inactive_days_before_warning: int = Field(default=7, ge=0)
    inactive_days_before_deletion: int = Field(default=21, ge=0)
    max_deletions_per_run: int = Field(default=5, ge=0)
    chunk_size: int = Field(default=5, ge=1)

    @model_validator(mode="after")
    def check_thresholds(self) -> "WorkspaceCleanerSettings":
        if self.inactive_days_before_warning >= self.inactive_days_before_deletion:
            raise ValueError(
                "inactive_days_before_warning must be lower than inactive_days_before_deletion"
            )
        return self

    @property
    def days_until_deletion(self) -> int:
        return self.inactive_days_before_deletion - self.inactive_days_before_warning

    @classmethod
    def from_config(cls, config) -> "WorkspaceCleanerSettings":
        return cls(
            inactive_days_before_warning=config.WORKSPACE_INACTIVE_DAYS_BEFORE_NOTIFICATION,
            inactive_days_before_deletion=config.WORKSPACE_INACTIVE_DAYS_BEFORE_DELETION,
            max_deletions_per_run=config.MAX_NUMBER_OF_WORKSPACES_DELETED_PER_EXECUTION,
            chunk_size=config.WORKSPACE_CLEANER_CHUNK_SIZE,
        )
