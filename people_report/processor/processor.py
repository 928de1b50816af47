from collections.abc import Sequence

from people_report.config.settings import Settings
from people_report.logging.logger import Log
from people_report.processor.pipeline import PipelineContext, PipelineStep
from people_report.processor.steps import (
    LoadPeopleStep,
    LogFailureStep,
    WriteNameFrequenciesStep,
    WriteOrderedAddressesStep,
)


class Processor:
    """Runs the report pipeline steps in order.

    Pipeline: load people -> write name frequencies -> write ordered addresses.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep,
    ) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def process(self, context: PipelineContext) -> PipelineContext:
        """Run every step; on failure run the failure step and re-raise."""
        Log.info(f"Processing {context.source_path}")
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        Log.info(
            f"Finished {context.source_path}: {context.people_loaded} people, "
            f"{context.names_written} names, {context.addresses_written} addresses"
        )
        return context


def build_context(settings: Settings) -> PipelineContext:
    """Resolve source and output paths from settings."""
    return PipelineContext(
        source_path=settings.source_path,
        name_frequency_path=settings.name_frequency_path,
        ordered_address_path=settings.ordered_address_path,
    )


def build_processor() -> Processor:
    """Build a Processor with the default report steps."""
    steps: list[PipelineStep] = [
        LoadPeopleStep(),
        WriteNameFrequenciesStep(),
        WriteOrderedAddressesStep(),
    ]
    return Processor(steps=steps, failed_step=LogFailureStep())
