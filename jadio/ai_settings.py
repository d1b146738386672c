"""The form behind the AI settings window."""

from __future__ import annotations

from dataclasses import dataclass, fields

DEFAULT_MODEL = "claude-3-sonnet"
TEMPERATURE_RANGE = (0.0, 2.0)
TEMPERATURE_STEP = 0.1
MAX_TOKENS_RANGE = (100, 8192)
MAX_TOKENS_STEP = 100


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class AiSettingsForm:
    """Values edited in the AI settings window."""

    model_name: str = DEFAULT_MODEL
    api_key: str = ""
    temperature: float = 0.7
    max_tokens: int = 4096
    auto_complete: bool = True
    code_suggestions: bool = True

    def set_temperature(self, value: float) -> float:
        """Set the temperature, kept within 0.0–2.0 in steps of 0.1."""
        low, high = TEMPERATURE_RANGE
        stepped = round(_clamp(float(value), low, high) / TEMPERATURE_STEP) * TEMPERATURE_STEP
        self.temperature = round(_clamp(stepped, low, high), 10)
        return self.temperature

    def set_max_tokens(self, value: int) -> int:
        """Set the token limit, kept within 100–8192 in steps of 100."""
        low, high = MAX_TOKENS_RANGE
        stepped = round(_clamp(value, low, high) / MAX_TOKENS_STEP) * MAX_TOKENS_STEP
        self.max_tokens = int(_clamp(stepped, low, high))
        return self.max_tokens

    def reset(self) -> None:
        """Restore every field to its default."""
        defaults = type(self)()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))