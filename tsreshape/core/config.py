"""
Library configuration for tsreshape.

Provides environment-aware defaults for resampling call sites that do not pass
an explicit interval or aggregation function. Defaults are validated at
construction so a malformed interval fails before any series is processed:
IntervalParseError for the interval, ConfigurationError for any other field.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .intervals import parse_interval
from .types import AggregationFunction


class ResamplingConfig(BaseModel):
	"""
	Defaults for downsampling and group-by.

	Notes:
	- default_interval: bucket width used when a caller omits one.
	- default_function: aggregation applied to each bucket.
	- fill_gaps: use the single-pass grouping that emits null points for
	  empty buckets; otherwise empty buckets are left out.
	"""

	default_interval: str = Field("1m", description="Bucket width, e.g. 30s, 1m, 1h")
	default_function: AggregationFunction = Field(
		AggregationFunction.AVG, description="Bucket aggregation"
	)
	fill_gaps: bool = Field(True, description="Emit null points for empty buckets")

	def __init__(self, **data: Any) -> None:
		try:
			super().__init__(**data)
		except ValidationError as exc:
			raise ConfigurationError(f"Invalid resampling config: {exc}") from exc

	@field_validator("default_interval")
	@classmethod
	def validate_interval(cls, value: str) -> str:
		# IntervalParseError is not a ValueError, so pydantic lets it propagate
		parse_interval(value)
		return value

	@property
	def default_interval_ms(self) -> int:
		return parse_interval(self.default_interval)


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.

	Nested values use a double underscore, e.g.
	TSRESHAPE_RESAMPLING__DEFAULT_INTERVAL=5m
	"""

	model_config = SettingsConfigDict(
		env_prefix="TSRESHAPE_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	log_to_file: bool = Field(False, description="Also write logs to logs_dir")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	resampling: ResamplingConfig = ResamplingConfig()

	def __init__(self, **values: Any) -> None:
		try:
			super().__init__(**values)
		except ValidationError as exc:
			raise ConfigurationError(f"Invalid configuration: {exc}") from exc

	def model_post_init(self, __context: object) -> None:
		if self.log_to_file:
			self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
