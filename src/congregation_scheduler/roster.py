"""
Roster lookup: resolve free-text names to stable publisher ids.

The roster is read-only once built and is handed to the cleaners through the
validation context, so tests and callers can swap in their own list.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol


def normalize_name_for_match(nome: str) -> str:
    """Trim and case-fold a name for comparison."""
    if not nome:
        return ""
    return nome.strip().casefold()


@dataclass(frozen=True)
class RosterEntry:
    id: str
    nome: str


class NameMatcher(Protocol):
    def match(self, nome: str, entries: Sequence[RosterEntry]) -> RosterEntry | None: ...


class SubstringNameMatcher:
    """
    Case-insensitive exact match, then substring containment in either direction.

    The first entry in roster order wins, so "Célio" can shadow "Célio Horn" when
    the query is only a fragment of both.
    """

    def match(self, nome: str, entries: Sequence[RosterEntry]) -> RosterEntry | None:
        query = normalize_name_for_match(nome)
        if not query:
            return None

        for entry in entries:
            if normalize_name_for_match(entry.nome) == query:
                return entry

        for entry in entries:
            candidate = normalize_name_for_match(entry.nome)
            if not candidate:
                continue
            if query in candidate or candidate in query:
                return entry
        return None


class Roster:
    def __init__(self, entries: Iterable[RosterEntry], matcher: NameMatcher | None = None):
        self._entries = tuple(entries)
        self._by_id = {entry.id: entry for entry in self._entries}
        self._matcher = matcher or SubstringNameMatcher()

    @classmethod
    def default(cls) -> "Roster":
        return cls(DEFAULT_ROSTER_ENTRIES)

    @property
    def entries(self) -> tuple[RosterEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def find_by_name(self, nome: str) -> RosterEntry | None:
        if not isinstance(nome, str):
            return None
        entry = self._matcher.match(nome, self._entries)
        if entry:
            logging.debug(f"roster match: {nome!r} -> {entry.nome!r} ({entry.id})")
        return entry

    def find_by_id(self, entry_id: str) -> RosterEntry | None:
        if not entry_id:
            return None
        return self._by_id.get(entry_id.strip())

    def names_to_ids(self, nomes: Iterable[str]) -> list[str]:
        """Map names to ids, keeping unresolved names as placeholders."""
        ids = []
        for nome in nomes:
            entry = self.find_by_name(nome)
            ids.append(entry.id if entry else nome)
        return ids

    def as_mapping(self) -> dict[str, str]:
        return {entry.nome: entry.id for entry in self._entries}

    def prompt_listing(self) -> str:
        """Roster rendered as ``"nome": "id"`` lines for extraction prompts."""
        return ",\n  ".join(f'"{entry.nome}": "{entry.id}"' for entry in self._entries)


DEFAULT_ROSTER_ENTRIES = (
    RosterEntry("0627e112-ff21-4c4c-9020-c2e9336b23d1", "Deise"),
    RosterEntry("0ecb71fe-628d-4fee-b8b3-3e8a4fc27d2f", "Teresinha"),
    RosterEntry("179d12c4-8132-481f-a6f5-8e770c90c3ad", "Samara"),
    RosterEntry("198b89ab-3c18-4a6f-94eb-ab21a7fbc52c", "Joel"),
    RosterEntry("1eaa92e7-7144-4d7c-96a6-240b1a4e2986", "Eliseu"),
    RosterEntry("29fae5dc-a41c-429d-85df-3e8ffbdee2d7", "Adna"),
    RosterEntry("2af9e655-c3c4-415b-8324-f7e172af585a", "Arthur"),
    RosterEntry("2b24c2b2-0478-4ffa-be92-f65540b8efe9", "Silvana"),
    RosterEntry("36d686d5-4f10-43de-980d-1ab85b49c8ab", "Vilson"),
    RosterEntry("43df4230-538b-4cd0-84fc-28670c034af7", "Célio"),
    RosterEntry("4742fff8-1bcf-41cd-baf9-84a489623381", "Isolde"),
    RosterEntry("4bfb17f3-140c-4e13-a05d-928e13de4856", "Daniele"),
    RosterEntry("523ce8bd-e870-4c20-9416-1821c5153234", "Milene"),
    RosterEntry("5d11c0e9-be3d-43fa-bc67-e3a475bef0e8", "José"),
    RosterEntry("6563c4f4-8f80-4f2f-956f-1ee82becd3b2", "Leunice"),
    RosterEntry("68cb9d4f-2161-4a0c-9fbc-de163726b710", "Oscar"),
    RosterEntry("6b12b534-c79e-4ac9-b75a-59d83aeb708e", "Juliane"),
    RosterEntry("6bd9ef8e-483d-4629-aeb5-d4dd989ee849", "Volmir"),
    RosterEntry("72479d08-ca8b-4ab8-865b-68e8fa720328", "Helmut"),
    RosterEntry("7624f826-c548-425e-bc60-4f8e4b23ffb5", "Mikael"),
    RosterEntry("77125e22-ac86-4ca5-a663-29a7a3640684", "Samuel"),
    RosterEntry("847f29c9-4243-4e4d-82d3-1e0aef8ece9c", "Sebastiana"),
    RosterEntry("9718fefd-6029-4fd4-bfce-8d72345d9825", "Cleria"),
    RosterEntry("9d02275b-04f4-4e5a-96f5-edbc21fc62f3", "Antônio"),
    RosterEntry("a0c54f9d-6a93-48c3-b931-022c4c0f6248", "Cleito"),
    RosterEntry("a2dc9e52-de25-4d38-bbda-c3965f031ea7", "Loni"),
    RosterEntry("aa46c264-36ce-4d17-99ce-a41192874a5e", "Andrea"),
    RosterEntry("ad215358-9a5b-4589-8347-59af6674022b", "Marcos"),
    RosterEntry("aea78c4d-2662-4cb8-bd5b-e4b5fa427d69", "Rose"),
    RosterEntry("bc268a45-97dc-4c16-a719-e2bbe04bf4d2", "Matheus Fernandes"),
    RosterEntry("c8637955-3eac-4d70-8fc9-21ab9dcace4f", "Paulo"),
    RosterEntry("d8b6b6ed-470d-4b13-92e5-4a1333feb02b", "Célia"),
    RosterEntry("e1bb98ac-e8df-4908-9734-95eb00e8bb10", "Marta"),
    RosterEntry("f210d291-952f-4b7f-9b50-2ad71bae24ce", "Bernardo"),
    RosterEntry("f36586bf-74d5-4962-beac-9e9412e9475c", "Maria"),
)
