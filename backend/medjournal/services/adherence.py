# medication adherence from the medication lines of journal entries

from typing import Iterable

from medjournal.models.journal import JournalEntry


def medication_counts(entries: Iterable[JournalEntry]) -> tuple[int, int]:
    """(taken, total) medication lines across the given entries"""
    taken = 0
    total = 0
    for entry in entries:
        total += len(entry.medications)
        taken += sum(1 for med in entry.medications if med.taken)
    return taken, total


def adherence(entries: Iterable[JournalEntry]) -> float:
    """percentage of medication lines marked taken, 0 when there are none"""
    taken, total = medication_counts(entries)
    if total == 0:
        return 0.0
    return 100 * taken / total
