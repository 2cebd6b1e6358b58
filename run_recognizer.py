"""
Example run of the lookup entity recognizer.

Learns a few entities, recognizes them in a sample sentence, then shows that a
snapshot restores the same behaviour in a fresh recognizer.

The recognizer expects tokens produced by an upstream tokenizer; a small regex
splitter stands in for it here.
"""
import json
import logging
import re
import sys

from lookup_ner.config.settings import LOG_LEVEL
from lookup_ner.entity_extraction.recognizer import EntityRecognizer

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("run_recognizer")

# ---------------------------------------------------------------------------
# Training data
# ---------------------------------------------------------------------------
TRAINING_DATA = [
    {"text": "manchester united", "entityType": "club", "uid": "manu"},
    {"text": "manchester", "entityType": "city"},
    {"text": "U K", "entityType": "country", "uid": "uk"},
]

SENTENCE = "Manchester United is a football club based in Manchester, U. K."

_TOKEN_RE = re.compile(r"(?P<number>\d+(?:[.,]\d+)*)|(?P<word>\w+)|(?P<punctuation>[^\w\s])")


def tokenize(text: str) -> list:
    """Split `text` into word / number / punctuation tokens."""
    return [
        {"value": match.group(0), "tag": match.lastgroup}
        for match in _TOKEN_RE.finditer(text)
    ]


# ---------------------------------------------------------------------------
# Learn & recognize
# ---------------------------------------------------------------------------
ner = EntityRecognizer()
learned = ner.learn(TRAINING_DATA)
logger.info("Entities learned  : %d", learned)

tokens = tokenize(SENTENCE)
logger.info("Tokens            : %d", len(tokens))

recognized = ner.recognize(tokens)
entities = [t for t in recognized if "entityType" in t]
logger.info("Entities found    : %d", len(entities))

# ---------------------------------------------------------------------------
# Snapshot round trip
# ---------------------------------------------------------------------------
snapshot = ner.export_snapshot()
restored = EntityRecognizer()
restored.import_snapshot(snapshot)

if restored.recognize(tokenize(SENTENCE)) != recognized:
    logger.error("Restored recognizer disagrees with the original")
    sys.exit(1)

# ---------------------------------------------------------------------------
# Print summary
# ---------------------------------------------------------------------------
print("\n" + "=" * 70)
print("LOOKUP NER — RESULT")
print("=" * 70)
print(f"sentence    : {SENTENCE}")
print(f"snapshot    : {len(snapshot)} chars")

print(f"\nEntities ({len(entities)}):")
for e in entities:
    print(f"  {e['entityType']:10s} {e['uid']:12s} ← {' '.join(e['originalSeq'])}")

print("\nTokens:")
print(json.dumps(recognized, ensure_ascii=False, indent=2))
print("=" * 70 + "\n")
