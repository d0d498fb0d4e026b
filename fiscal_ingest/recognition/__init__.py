from fiscal_ingest.recognition.catalogue import CATALOGUE, CATALOGUE_CODES
from fiscal_ingest.recognition.recognizer import FieldRecognizer

__all__ = ["CATALOGUE", "CATALOGUE_CODES", "FieldRecognizer"]
