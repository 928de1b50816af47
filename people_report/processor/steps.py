from people_report.logging.logger import Log
from people_report.processor.pipeline import PipelineContext, PipelineStep
from people_report.reports.generator import name_frequencies, ordered_addresses
from people_report.reports.writer import write_report


class LoadPeopleStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.store.load(context.source_path)
        context.people_loaded = len(context.store.people)
        return context


class WriteNameFrequenciesStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        frequencies = name_frequencies(context.store.people)
        write_report(frequencies, context.name_frequency_path)
        context.names_written = len(frequencies)
        return context


class WriteOrderedAddressesStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        addresses = ordered_addresses(context.store.people)
        write_report(addresses, context.ordered_address_path)
        context.addresses_written = len(addresses)
        return context


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.exception(f"The following error has occurred: {context.error_message}")
        return context
