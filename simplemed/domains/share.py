"""
Plain-text scan summary handed to the platform share mechanism.
"""

from __future__ import annotations

from simplemed.domains.models import Scan


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_scan_summary(scan: Scan, category_name: str | None = None) -> str:
    """
    Format a scan as shareable plain text.

    Args:
        scan: Scan to summarise.
        category_name: Optional owning section name, shown under the title.

    Returns:
        Multi-line text covering summary, preparation, logistics and safety.
    """
    prep = scan.preparation
    logistics = scan.logistics
    safety = scan.safety

    lines = [scan.title]
    if category_name:
        lines.append(category_name)
    if scan.short_summary:
        lines += ["", scan.short_summary]

    fasting = f"{prep.fasting_hours} hours" if prep.requires_fasting else "Not required"
    lines += [
        "",
        "Preparation",
        f"- Fasting: {fasting}",
        f"- Bladder: {prep.bladder}",
        f"- Instructions: {prep.instructions}",
        "",
        "What to expect",
        f"- Duration: {logistics.duration_minutes} minutes",
        f"- Noise level: {logistics.noise_level}",
        f"- Claustrophobia risk: {logistics.claustrophobia_risk}",
        "",
        "Safety",
        f"- Radiation level: {safety.radiation_level}",
    ]
    if safety.radiation_note:
        lines.append(f"- {safety.radiation_note}")
    lines += [
        f"- Contrast risk: {_yes_no(safety.contrast_risk)}",
        f"- Safe in pregnancy: {_yes_no(safety.pregnancy_safe)}",
    ]
    return "\n".join(lines)
