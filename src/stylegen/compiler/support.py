"""SDK support resolution.

Every layer type and attribute in the style spec carries an ``sdk-support``
block naming the first Android and iOS SDK versions that handle it, split
into a basic tier and a data-driven styling tier. This module turns that
block into a boolean matrix against the configured target versions.
"""

from __future__ import annotations

from typing import Any, Mapping

from stylegen.compiler.records import PlatformSupport, SupportMatrix
from stylegen.config import GeneratorConfig

BASIC_FUNCTIONALITY = "basic functionality"
DATA_DRIVEN_STYLING = "data-driven styling"

PLATFORMS = ("android", "ios")


def is_version_gte(version: str, other_version: str) -> bool:
    """Return True if `version` is at least `other_version`.

    Versions are compared by dropping the dots and reading the remaining
    digits as one integer ("8.1.0" -> 810). This only orders versions
    correctly when the compared components have the same width.
    Strings that are not dotted digits never compare as newer.
    """
    try:
        v = int("".join(version.split(".")))
        ov = int("".join(other_version.split(".")))
    except ValueError:
        return False
    return v >= ov


def _tier_support(tier: Any, config: GeneratorConfig) -> PlatformSupport:
    if not isinstance(tier, Mapping):
        return PlatformSupport()

    flags = {}
    for platform in PLATFORMS:
        minimum = tier.get(platform)
        target = config.target_version(platform)
        flags[platform] = bool(
            isinstance(minimum, str) and minimum and is_version_gte(target, minimum)
        )
    return PlatformSupport(**flags)


def resolve_support(
    sdk_support: Mapping[str, Any] | None, config: GeneratorConfig
) -> SupportMatrix:
    """Build the support matrix for one ``sdk-support`` declaration.

    Missing or malformed declarations resolve to unsupported. Data-driven
    styling only counts when both platforms have it; otherwise both cells
    are cleared.
    """
    if not isinstance(sdk_support, Mapping):
        sdk_support = {}

    basic = _tier_support(sdk_support.get(BASIC_FUNCTIONALITY), config)
    data = _tier_support(sdk_support.get(DATA_DRIVEN_STYLING), config)

    if not (data.android and data.ios):
        data = PlatformSupport()

    return SupportMatrix(basic=basic, data=data)


def is_supported(attribute: Any, config: GeneratorConfig) -> bool:
    """Basic support on both platforms."""
    if not isinstance(attribute, Mapping):
        return False
    support = resolve_support(attribute.get("sdk-support"), config)
    return support.basic.android and support.basic.ios
