from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from people_report.records.store import PersonStore


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    name_frequency_path: Path
    ordered_address_path: Path
    store: PersonStore = field(default_factory=PersonStore)
    people_loaded: int = 0
    names_written: int = 0
    addresses_written: int = 0
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
