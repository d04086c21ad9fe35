from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .normalizer import parse_size, parse_time

class ShareFile(BaseModel):
    id: str = Field(alias="id")
    name: str = Field(alias="name_all")
    size: str = Field(default="", alias="size")
    time: str = Field(default="", alias="time")
    icon: Optional[str] = Field(default=None, alias="icon")
    class Config:
        populate_by_name = True

    @property
    def size_bytes(self) -> int:
        return parse_size(self.size)

    @property
    def modified(self) -> datetime:
        return parse_time(self.time)
