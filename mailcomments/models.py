from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


# -------------------
# Notification payload
# -------------------
class MessageAttribute(BaseModel):
    """One wrapped attribute, e.g. {"Type": "String", "Value": "..."}."""

    model_config = ConfigDict(extra="ignore")

    Type: Optional[StrictStr] = None
    Value: Optional[StrictStr] = None


class AttributeSet(BaseModel):
    """The MessageAttributes object of a notification."""

    model_config = ConfigDict(extra="ignore")

    Name: Optional[MessageAttribute] = None
    Email: Optional[MessageAttribute] = None
    Text: Optional[MessageAttribute] = None
    URL: Optional[MessageAttribute] = None
    IP: Optional[MessageAttribute] = None
    UserAgent: Optional[MessageAttribute] = None
    Time: Optional[MessageAttribute] = None
    ID: Optional[MessageAttribute] = None

    def value(self, field: str) -> Optional[str]:
        """Return the attribute's Value, or None when it is absent or blank."""
        attribute = getattr(self, field)
        if attribute is None or not attribute.Value:
            return None
        return attribute.Value


class Notification(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message_attributes: Optional[AttributeSet] = Field(default=None, alias="MessageAttributes")

    def attributes(self) -> AttributeSet:
        return self.message_attributes or AttributeSet()


# -------------------
# Comment
# -------------------
@dataclass(frozen=True)
class Comment:
    """A single comment left on a page."""

    name: Optional[str]
    email: Optional[str]
    text: Optional[str]
    url: Optional[str]
    ip: Optional[IPAddress]
    user_agent: Optional[str]
    time: Optional[datetime]
    id: Optional[str]

    def missing_field(self) -> Optional[str]:
        """Name of the first required field that is missing, if any."""
        checks = (
            ("name", self.name),
            ("email", self.email),
            ("text", self.text),
            ("URL", self.url),
            ("IP", self.ip),
            ("UserAgent", self.user_agent),
            ("time", self.time),
            ("ID", self.id),
        )
        for field, value in checks:
            if value is None or value == "":
                return field
        if self.time.timestamp() == 0:
            return "time"
        return None
