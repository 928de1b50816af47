from collections import Counter
from collections.abc import Iterable

from people_report.records.models import Address, NameFrequency, Person


def name_frequencies(people: Iterable[Person]) -> list[NameFrequency]:
    """Count every first and last name, most frequent first then alphabetically."""
    counts: Counter[str] = Counter()
    for person in people:
        counts[person.first_name] += 1
        counts[person.last_name] += 1
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [NameFrequency(name=name, frequency=count) for name, count in ordered]


def ordered_addresses(people: Iterable[Person]) -> list[Address]:
    """Return each person's address sorted by street name, keeping file order for ties."""
    return sorted((person.address for person in people), key=lambda a: a.street_name)
