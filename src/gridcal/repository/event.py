# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from gridcal import configuration, time
from gridcal.model.category import normalize_category
from gridcal.model.entity_id import EntityId, generate_event_id
from gridcal.model.event import Event, RecurrencePattern
from gridcal.repository.configuration import CONFIGURATION_REPO

logger = logging.getLogger(__name__)


class EventRepository:
    """
    Holds the live event list and persists it as one YAML snapshot.

    The whole list lives under a single storage key in the events file and is
    rewritten in full on flush.
    """

    def __init__(
        self, data_path: Optional[Path] = None, storage_key: Optional[str] = None
    ) -> None:
        self._events: Optional[list[Event]] = None
        self._data_path = data_path
        self._storage_key = storage_key
        self.is_dirty = False

    @property
    def data_path(self) -> Path:
        if self._data_path is not None:
            return self._data_path
        return configuration.DATA_EVENTS_PATH

    @property
    def storage_key(self) -> str:
        if self._storage_key is None:
            self._storage_key = CONFIGURATION_REPO.get_config()["storage_key"]
        return self._storage_key

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not self.data_path.is_file():
            return

        try:
            snapshot = load(self.data_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.error("Error reading events from %s: %s", self.data_path, e)
            return

        if snapshot is None:
            return
        if not isinstance(snapshot, dict):
            logger.error("Ignoring malformed event snapshot in %s", self.data_path)
            return

        raw_events = snapshot.get(self.storage_key) or []
        for raw_event in raw_events:
            if isinstance(raw_event, dict):
                self._events.append(
                    self.__convert_event_for_deserialization(raw_event)
                )

    def __load_snapshot_for_update(self) -> dict[str, Any]:
        if not self.data_path.is_file():
            return {}
        try:
            snapshot = load(self.data_path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning("Overwriting unreadable snapshot %s: %s", self.data_path, e)
            return {}
        if not isinstance(snapshot, dict):
            return {}
        return snapshot

    def __save_data(self) -> None:
        serializable_events = [
            self.__convert_event_for_serialization(deepcopy(event))
            for event in self.events
        ]
        # Lists stored under other keys are written back untouched
        snapshot = self.__load_snapshot_for_update()
        snapshot[self.storage_key] = serializable_events

        self.data_path.parent.mkdir(parents=True, exist_ok=True)
        self.data_path.write_text(dump(snapshot, Dumper=Dumper))

    def flush(self) -> bool:
        if self._events is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_event_for_serialization(self, event: Event) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        serializable_event["created"] = time.datetime_to_iso_str(
            serializable_event["created"]
        )
        serializable_event["updated"] = time.datetime_to_iso_str(
            serializable_event["updated"]
        )
        return serializable_event

    def __convert_event_for_deserialization(self, event: dict[str, Any]) -> Event:
        deserializable_event = event
        now = time.now_local()
        # Snapshots written by hand or by older versions may lack these fields
        deserializable_event.setdefault("description", None)
        deserializable_event.setdefault("recurring", False)
        deserializable_event.setdefault("recurrence_pattern", RecurrencePattern.NONE)
        deserializable_event.setdefault("recurrence_interval", 1)
        date = time.date_from_str_optional(deserializable_event.get("date"))
        if date is not None:
            deserializable_event["date"] = time.date_to_str(date)
        elif deserializable_event.get("date") is not None:
            deserializable_event["date"] = str(deserializable_event["date"])
        deserializable_event["start_time"] = time.time_of_day_to_str_optional(
            deserializable_event.get("start_time")
        )
        deserializable_event["end_time"] = time.time_of_day_to_str_optional(
            deserializable_event.get("end_time")
        )
        deserializable_event["category"] = normalize_category(
            deserializable_event.get("category")
        )
        deserializable_event["created"] = (
            time.datetime_from_value_optional(deserializable_event.get("created")) or now
        )
        deserializable_event["updated"] = (
            time.datetime_from_value_optional(deserializable_event.get("updated")) or now
        )
        return cast(Event, deserializable_event)

    def save_new_event(self, event: Event) -> EntityId:
        self.is_dirty = True

        event["id"] = generate_event_id()
        event["category"] = normalize_category(event["category"])
        if not event["recurring"]:
            event["recurrence_pattern"] = RecurrencePattern.NONE

        self.events.append(event)

        return event["id"]

    def add_events(self, events: list[Event]) -> int:
        """Append events that keep their own ids, skipping ids already stored.

        Returns:
            Number of events added
        """
        existing_ids = {event["id"] for event in self.events}
        added = 0
        for event in events:
            if event["id"] in existing_ids:
                continue
            self.events.append(deepcopy(event))
            existing_ids.add(event["id"])
            added += 1

        if added > 0:
            self.is_dirty = True
        return added

    def modify_event(
        self,
        id: EntityId,
        title: Optional[str] = None,
        date: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        recurring: Optional[bool] = None,
        recurrence_pattern: Optional[str] = None,
        recurrence_interval: Optional[int] = None,
        remove_description: bool = False,
    ) -> None:
        self.is_dirty = True

        event = [event for event in self.events if event["id"] == id][0]
        # Set updated timestamp to current moment
        event["updated"] = time.now_local()
        if title is not None:
            event["title"] = title
        if date is not None:
            event["date"] = date
        if start_time is not None:
            event["start_time"] = start_time
        if end_time is not None:
            event["end_time"] = end_time
        if description is not None:
            event["description"] = description
        if category is not None:
            event["category"] = normalize_category(category)
        if recurring is not None:
            event["recurring"] = recurring
        if recurrence_pattern is not None:
            event["recurrence_pattern"] = recurrence_pattern
        if recurrence_interval is not None:
            event["recurrence_interval"] = recurrence_interval

        if remove_description:
            event["description"] = None

        if not event["recurring"]:
            event["recurrence_pattern"] = RecurrencePattern.NONE

    def move_event(self, id: EntityId, date: str) -> None:
        self.modify_event(id, date=date)

    def delete_event(self, id: EntityId) -> None:
        self.is_dirty = True
        self._events = [event for event in self.events if event["id"] != id]

    def get_all_events(self) -> list[Event]:
        return deepcopy(self.events)

    def get_event(self, id: EntityId) -> Event:
        return deepcopy([event for event in self.events if event["id"] == id][0])

    def find_events_by_id_prefix(self, id_prefix: str) -> list[Event]:
        """Events whose id equals or starts with the prefix; an exact match wins."""
        exact_matches = [event for event in self.events if event["id"] == id_prefix]
        if len(exact_matches) > 0:
            return deepcopy(exact_matches)
        return deepcopy(
            [
                event
                for event in self.events
                if event["id"] is not None and event["id"].startswith(id_prefix)
            ]
        )


EVENT_REPO = EventRepository()
