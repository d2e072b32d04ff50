from typing import Optional
from pydantic import BaseModel


class TorrentResponse(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None


class PortTestResponse(BaseModel):
    port_is_open: bool
    status: str  # "open" or "closed"


class FetchErrorDetail(BaseModel):
    kind: str  # "transport", "protocol" or "decode"
    message: str
