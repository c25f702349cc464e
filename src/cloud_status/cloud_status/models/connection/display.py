# ABOUTME: Rendering-ready projection of a connection status
# ABOUTME: Total mapping from status to colors, icon and translated label

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from cloud_status.i18n.translations import translate
from cloud_status.models.connection.enum import ConnectionStatus


class StatusDisplay(BaseModel):
    """
    Everything a renderer needs to draw the connection indicator.

    Instances are immutable and carry no behaviour; they are recomputed on
    demand from the displayed status.
    """

    model_config = ConfigDict(frozen=True)

    status: ConnectionStatus = Field(description="The status this projection was built from")
    gradient_colors: Tuple[str, str] = Field(description="Background gradient, start and end color")
    icon_name: str = Field(description="Icon identifier in the icon font")
    icon_color: str = Field(description="Icon color as a hex string")
    label: str = Field(description="Translated, human-readable status label")


# (gradient colors, icon name, icon color, label key)
_STYLES: Dict[ConnectionStatus, Tuple[Tuple[str, str], str, str, str]] = {
    ConnectionStatus.CONNECTED: (("#4CAF50", "#81C784"), "check-circle", "#4CAF50", "connection:connected"),
    ConnectionStatus.CONNECTING: (("#FFA726", "#FB8C00"), "spinner", "#FB8C00", "connection:connecting"),
    ConnectionStatus.ERROR: (("#FFC107", "#FFD54F"), "refresh", "#FFD54F", "connection:reconnecting"),
    ConnectionStatus.DISCONNECTED: (
        ("#FF8A80", "#FF5252"),
        "exclamation-circle",
        "#FF5252",
        "connection:disconnected",
    ),
}


def coerce_status(value: Any) -> ConnectionStatus:
    """
    Normalize an arbitrary status value into a known ConnectionStatus.

    Accepts enum members and their string values. Anything unrecognized,
    including ``None`` and values from newer protocol versions, becomes
    ``DISCONNECTED``.
    """
    if isinstance(value, ConnectionStatus):
        return value
    try:
        return ConnectionStatus(value)
    except ValueError:
        return ConnectionStatus.DISCONNECTED


def build_status_display(status: Any, locale: str | None = None) -> StatusDisplay:
    """
    Project a status onto its visual representation.

    Args:
        status: The displayed status; unknown values render as disconnected
        locale: Label locale, English when omitted or unknown

    Returns:
        A StatusDisplay for the coerced status. Never raises.
    """
    known = coerce_status(status)
    gradient, icon_name, icon_color, label_key = _STYLES[known]
    return StatusDisplay(
        status=known,
        gradient_colors=gradient,
        icon_name=icon_name,
        icon_color=icon_color,
        label=translate(label_key, locale),
    )
