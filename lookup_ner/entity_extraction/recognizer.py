"""
EntityRecognizer — dictionary-based named entity recognizer.

One instance owns its configuration and learned entities; nothing is shared
between instances.

Flow:
    1. configure()        what to skip inside multi-word entities
    2. learn()            entity definitions → head/phrase indexes
    3. recognize()        tokens → tokens with entities merged
    4. export_snapshot()  / import_snapshot() at any time

Instances are not synchronized; serialize calls from multiple threads.
"""
import logging
from typing import Any, Iterable, List, Optional, Sequence

from lookup_ner.entity_extraction.config_store import ConfigStore
from lookup_ner.entity_extraction.dictionary import EntityDictionary
from lookup_ner.entity_extraction.lemmatizer import Singularizer, resolve_singularizer
from lookup_ner.entity_extraction.matcher import recognize_tokens
from lookup_ner.entity_extraction.snapshot import export_snapshot, import_snapshot
from lookup_ner.monitoring.metrics import timed_operation

logger = logging.getLogger(__name__)


class EntityRecognizer:
    """
    Recognizes learned entities in tokenized text.

    Example:
        >>> ner = EntityRecognizer()
        >>> ner.learn([{"text": "manchester united", "entityType": "club", "uid": "manu"}])
        1
        >>> ner.recognize([{"value": "Manchester", "tag": "word"},
        ...                {"value": "United", "tag": "word"}])
        [{'entityType': 'club', 'uid': 'manu', 'originalSeq': ['Manchester', 'United'],
          'value': 'manchester united', 'tag': 'word'}]
    """

    def __init__(self, singularize: Optional[Singularizer] = None) -> None:
        """
        Args:
            singularize: Lemma fallback `word -> singular word`. Defaults to the
                spaCy-backed `lemmatizer.singularize`.
        """
        self.singularize = resolve_singularizer(singularize)
        self.config_store = ConfigStore()
        self.dictionary = EntityDictionary()

    def configure(self, options: Any) -> dict:
        """
        Set tags/values to ignore and the diacritics mode; `{}` restores defaults.

        Raises:
            ConfigurationError: If options are malformed (state unchanged).
        """
        return self.config_store.configure(options)

    def learn(self, definitions: Iterable[Any]) -> int:
        """
        Learn entity definitions; returns how many were accepted.

        Each definition needs `text` and `entityType`; `uid`, `value` and any
        other fields are optional and copied onto recognized tokens.
        """
        with timed_operation("learn"):
            return self.dictionary.learn(definitions, self.config_store.normalize_phrase)

    def recognize(self, tokens: Sequence[dict]) -> List[dict]:
        """Merge recognized entity spans in `tokens`; other tokens pass through."""
        with timed_operation("recognize"):
            return recognize_tokens(tokens, self.dictionary, self.config_store, self.singularize)

    predict = recognize

    def export_snapshot(self) -> str:
        return export_snapshot(self.config_store, self.dictionary)

    def import_snapshot(self, snapshot: Any) -> bool:
        """
        Replace configuration and learned entities with a snapshot.

        Raises:
            SnapshotError: If the snapshot is invalid (state unchanged).
        """
        with timed_operation("import"):
            payload = import_snapshot(snapshot)

        self.reset()
        self.config_store.load(payload.config)
        self.dictionary.load(payload.head_index, payload.phrase_index)
        logger.info(
            "Imported snapshot: head=%d phrase=%d",
            len(payload.head_index),
            len(payload.phrase_index),
        )
        return True

    def reset(self) -> bool:
        """Restore default configuration and forget all learned entities."""
        self.config_store.reset()
        self.dictionary.clear()
        return True
