"""Config validator for bridge discovery.

Validates parsed DiscoveryConfig objects before a discovery call.
"""

import ipaddress

from .schema import DiscoveryConfig, ValidationError, ValidationResult

# UPnP Device Architecture: MX must be between 1 and 5 seconds
MIN_MX = 1
MAX_MX = 5


def validate_config(config: DiscoveryConfig) -> ValidationResult:
    """Validate discovery settings.

    Checks:
    - Deadline and advertised wait hint
    - Multicast group and ports
    - Vendor marker and receive buffer

    Args:
        config: DiscoveryConfig to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    _validate_timing(config, errors, warnings)
    _validate_network(config, errors)

    if not config.vendor_marker:
        errors.append(ValidationError(
            path="vendor_marker",
            message="'vendor_marker' must not be empty.",
        ))

    if config.buffer_size <= 0:
        errors.append(ValidationError(
            path="buffer_size",
            message=f"Buffer size must be positive, got {config.buffer_size}.",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )


def _validate_timing(
    config: DiscoveryConfig,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    if config.timeout <= 0:
        errors.append(ValidationError(
            path="timeout",
            message=f"Timeout must be positive, got {config.timeout}.",
        ))

    if not MIN_MX <= config.mx <= MAX_MX:
        errors.append(ValidationError(
            path="mx",
            message=f"MX must be between {MIN_MX} and {MAX_MX}, got {config.mx}.",
        ))
    elif config.timeout > 0 and config.mx >= config.timeout:
        warnings.append(ValidationError(
            path="mx",
            message=(
                f"MX ({config.mx}s) is not shorter than the timeout "
                f"({config.timeout}s). Late replies will be missed."
            ),
            severity="warning",
        ))


def _validate_network(config: DiscoveryConfig, errors: list[ValidationError]) -> None:
    try:
        group = ipaddress.ip_address(config.multicast_group)
    except ValueError:
        errors.append(ValidationError(
            path="multicast_group",
            message=f"Invalid IP address '{config.multicast_group}'.",
        ))
    else:
        if group.version != 4:
            errors.append(ValidationError(
                path="multicast_group",
                message=f"Only IPv4 is supported, got '{config.multicast_group}'.",
            ))
        elif not group.is_multicast:
            errors.append(ValidationError(
                path="multicast_group",
                message=f"'{config.multicast_group}' is not a multicast address.",
            ))

    if not 1 <= config.multicast_port <= 65535:
        errors.append(ValidationError(
            path="multicast_port",
            message=f"Invalid port {config.multicast_port}. Must be 1-65535.",
        ))

    # 0 asks the OS for an ephemeral port
    if not 0 <= config.listen_port <= 65535:
        errors.append(ValidationError(
            path="listen_port",
            message=f"Invalid port {config.listen_port}. Must be 0-65535.",
        ))
