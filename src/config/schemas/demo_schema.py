"""Demo configuration schemas."""

from pydantic import BaseModel, Field, field_validator


class FacadeDemoConfig(BaseModel):
    """Home theater facade demo settings."""

    movie: str = Field("Inception", description="Movie played by the facade demo")
    volume: int = Field(5, description="Sound system volume used by watch_movie")

    @field_validator("volume")
    @classmethod
    def validate_volume(cls, v: int) -> int:
        """Validate volume level."""
        if not 0 <= v <= 10:
            raise ValueError("Volume must be between 0 and 10")
        return v


class ProxyDemoConfig(BaseModel):
    """Bank account proxy demo settings."""

    pin: str = Field("1234", description="Shared secret guarding the account")
    initial_balance: float = Field(100.0, description="Opening balance")

    @field_validator("pin")
    @classmethod
    def validate_pin(cls, v: str) -> str:
        """Validate pin."""
        if not v:
            raise ValueError("Pin cannot be empty")
        return v

    @field_validator("initial_balance")
    @classmethod
    def validate_initial_balance(cls, v: float) -> float:
        """Validate opening balance."""
        if v < 0:
            raise ValueError("Initial balance cannot be negative")
        return v


class DemoConfig(BaseModel):
    """Settings for the demos that take tunable inputs."""

    facade: FacadeDemoConfig = Field(default_factory=lambda: FacadeDemoConfig())
    proxy: ProxyDemoConfig = Field(default_factory=lambda: ProxyDemoConfig())
