"""
Speed Test Contract Models.

Field names are camelCase on the wire to match the browser client.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SpeedTestResponse(BaseModel):
    """Successful speed test result."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    download_speed: float = Field(..., alias="downloadSpeed")
    upload_speed: float = Field(..., alias="uploadSpeed")
    unit: Literal["Mbps"] = "Mbps"


class SpeedTestErrorResponse(BaseModel):
    """Failed speed test envelope."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    download_speed: float = Field(default=0, alias="downloadSpeed")
    upload_speed: float = Field(default=0, alias="uploadSpeed")
