"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DatasetConfig:
    """An upstream GeoJSON dataset of resource locations.

    Attributes:
        label: Short unique name (e.g., "shelters", "pods")
        url: Where to fetch the GeoJSON FeatureCollection from
        resource_kind: Plural noun used in replies (e.g., "shelters")
        name_field: Feature property holding the display name
        address_field: Feature property holding the street address
        phone_field: Feature property holding the phone number
        postal_code_field: Feature property holding the postal code
        identity_field: Feature property holding a stable record ID
                        (None to use the feature's position)
    """
    label: str
    url: str
    resource_kind: str = "resources"
    name_field: str = "shelter"
    address_field: str = "address"
    phone_field: str = "phone"
    postal_code_field: str = "zip"
    identity_field: str | None = None


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        datasets: Resource datasets to serve, in reply order
        radius_miles: Search radius around each query postal code
        max_results_per_query: Resources listed per query postal code
        segment_budget: Character budget for one reply segment
        refresh_interval_seconds: How often to re-fetch the datasets
        gazetteer_country: Two-letter country code of the postal code table
        number_messages: Prefix multi-segment replies with "[i of n] "
        request_timeout_seconds: HTTP timeout for dataset fetches
    """
    datasets: list[DatasetConfig] = field(default_factory=list)
    radius_miles: float = 5.0
    max_results_per_query: int = 3
    segment_budget: int = 800
    refresh_interval_seconds: int = 300
    gazetteer_country: str = "US"
    number_messages: bool = True
    request_timeout_seconds: int = 30


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_dataset(dataset: DatasetConfig, field_name: str) -> list[ValidationError]:
    """Validate a single dataset entry.

    Pure function.

    Args:
        dataset: Dataset to validate
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not dataset.label:
        errors.append(ValidationError(
            field=f"{field_name}.label",
            message="Dataset label must not be empty",
        ))

    if not dataset.url:
        errors.append(ValidationError(
            field=f"{field_name}.url",
            message="Dataset URL must not be empty",
        ))
    elif "${" in dataset.url:
        errors.append(ValidationError(
            field=f"{field_name}.url",
            message="Dataset URL not resolved (still contains placeholder)",
            severity="warning",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.radius_miles <= 0:
        errors.append(ValidationError(
            field="radius_miles",
            message=f"Radius must be positive, got {config.radius_miles}",
        ))

    if config.max_results_per_query < 1:
        errors.append(ValidationError(
            field="max_results_per_query",
            message=f"Must list at least one result, got {config.max_results_per_query}",
        ))

    if config.segment_budget < 1:
        errors.append(ValidationError(
            field="segment_budget",
            message=f"Segment budget must be positive, got {config.segment_budget}",
        ))

    if config.refresh_interval_seconds < 1:
        errors.append(ValidationError(
            field="refresh_interval_seconds",
            message=f"Refresh interval must be positive, got {config.refresh_interval_seconds}",
        ))

    country = config.gazetteer_country
    if len(country) != 2 or not country.isalpha():
        errors.append(ValidationError(
            field="gazetteer_country",
            message=f"Country must be a two-letter code, got '{country}'",
        ))

    labels: set[str] = set()
    for i, dataset in enumerate(config.datasets):
        errors.extend(validate_dataset(dataset, f"datasets[{i}]"))
        if dataset.label in labels:
            errors.append(ValidationError(
                field=f"datasets[{i}].label",
                message=f"Duplicate dataset label '{dataset.label}'",
            ))
        labels.add(dataset.label)

    if not config.datasets:
        errors.append(ValidationError(
            field="datasets",
            message="No datasets configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
