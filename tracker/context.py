from dataclasses import dataclass

from tracker.data.repositories import LocalStore


@dataclass
class TrackerContext:
    store: LocalStore
    storage_label: str
    durable: bool = True
