"""Club state holders: presence, seating, waiting queue and ledger."""

from clubsimulator.entities.ledger import Ledger, TableAccount
from clubsimulator.entities.registry import SessionRegistry
from clubsimulator.entities.seating import ClosedTicket, SeatingMap, Ticket
from clubsimulator.entities.waiting_queue import QueueStats, WaitingQueue

__all__ = [
    "ClosedTicket",
    "Ledger",
    "QueueStats",
    "SeatingMap",
    "SessionRegistry",
    "TableAccount",
    "Ticket",
    "WaitingQueue",
]
