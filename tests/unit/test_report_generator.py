from pathlib import Path

from people_report.records.models import Address, NameFrequency, Person
from people_report.records.store import PersonStore
from people_report.reports.generator import name_frequencies, ordered_addresses


def _person(first: str, last: str, address: str = "1 Main St") -> Person:
    return Person(
        first_name=first,
        last_name=last,
        address=Address.from_string(address),
        phone_number="000",
    )


class TestNameFrequencies:
    def test_sample_file_ordering(self, sample_source: Path) -> None:
        store = PersonStore()
        store.load(sample_source)

        frequencies = name_frequencies(store.people)

        assert frequencies == [
            NameFrequency("Brown", 2),
            NameFrequency("Clive", 2),
            NameFrequency("Graham", 2),
            NameFrequency("Howe", 2),
            NameFrequency("James", 2),
            NameFrequency("Owen", 2),
            NameFrequency("Smith", 2),
            NameFrequency("Jimmy", 1),
            NameFrequency("John", 1),
        ]

    def test_counts_first_and_last_names_together(self) -> None:
        frequencies = name_frequencies([_person("Lee", "Lee"), _person("Ann", "Lee")])

        assert frequencies == [NameFrequency("Lee", 3), NameFrequency("Ann", 1)]

    def test_grouping_is_case_sensitive(self) -> None:
        frequencies = name_frequencies([_person("lee", "Lee")])

        assert frequencies == [NameFrequency("Lee", 1), NameFrequency("lee", 1)]

    def test_total_frequency_is_twice_people(self, sample_source: Path) -> None:
        store = PersonStore()
        store.load(sample_source)

        frequencies = name_frequencies(store.people)

        assert sum(f.frequency for f in frequencies) == 16

    def test_no_people_no_frequencies(self) -> None:
        assert name_frequencies([]) == []


class TestOrderedAddresses:
    def test_sample_file_ordering(self, sample_source: Path) -> None:
        store = PersonStore()
        store.load(sample_source)

        addresses = [str(a) for a in ordered_addresses(store.people)]

        assert addresses == [
            "65 Ambling Way",
            "8 Crimson Rd",
            "12 Howard St",
            "102 Long Lane",
            "94 Roland St",
            "78 Short Lane",
            "82 Stewart St",
            "49 Sutherland St",
        ]

    def test_equal_street_names_keep_input_order(self) -> None:
        people = [
            _person("A", "A", "9 Long Lane"),
            _person("B", "B", "1 Apple St"),
            _person("C", "C", "2 Long Rd"),
        ]

        addresses = [str(a) for a in ordered_addresses(people)]

        assert addresses == ["1 Apple St", "9 Long Lane", "2 Long Rd"]

    def test_ordinal_comparison_puts_uppercase_first(self) -> None:
        people = [_person("A", "A", "1 apple St"), _person("B", "B", "2 Zed St")]

        addresses = [str(a) for a in ordered_addresses(people)]

        assert addresses == ["2 Zed St", "1 apple St"]
