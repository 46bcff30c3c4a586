"""Alarm example: declare a model, listen to changes, serialize it."""

import logging
from enum import IntEnum

from pydantic import BaseModel, Field

from mvcmodel import Model


class AlarmType(IntEnum):
    QUICK = 0   # the main alarm on the home screen
    CUSTOM = 1  # an alarm that can be customized to choose which days


class AlarmDefaults(BaseModel):
    """Default alarm values."""

    time: str = "23:55"
    type: AlarmType = AlarmType.QUICK
    days: list[str] = Field(default_factory=list)
    active: bool = False
    name: str = "Home"


class Alarm(Model):
    DEFAULT_OPTIONS = AlarmDefaults


def main():
    """Create an alarm, react to edits, print its JSON."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    alarm = Alarm({"name": "myAlarmName!"})
    print(f"Created {alarm!r}")

    alarm.on("change:name", lambda value: print(f"  name -> {value}"))
    alarm.on("change:active", lambda value: print(f"  active -> {value}"))

    alarm.set("name", "newName")
    alarm.patch({"active": True, "days": ["mon", "tue"]})

    print(alarm.serialize(indent=2))


if __name__ == "__main__":
    main()
