#!/usr/bin/env python3
"""
CLUSTERFORGE SPLITTER - Document Decoder (Stage 1)
--------------------------------------------------
Breaks a multi-document YAML stream into independent documents. The
YAML parser decides where documents start and end; '---' is never
scanned for textually here. Each retained document is re-serialized in
the canonical house style, comments dropped, rather than sliced out of
the original text.

Author: Cluster Forge Team
Date: 2026-10-16
"""

import logging
from typing import List, Union

from ruamel.yaml import YAMLError

from clusterforge.core.exceptions import DecodeError
from clusterforge.core.yamlio import build_yaml, dump_document, strip_comments

logger = logging.getLogger("clusterforge.smelter")


class DocumentSplitter:
    """
    Decodes a stream one document at a time, in stream order.
    Empty documents (those that load as None) are dropped.
    """

    def __init__(self):
        self.loader = build_yaml()
        self.dumper = build_yaml()

    def split(self, stream: Union[str, bytes]) -> List[str]:
        """
        Returns the canonical text of every non-empty document.

        Raises:
            DecodeError: on the first syntactically invalid document.
                No partial result is returned.
        """
        documents = []
        index = 0
        try:
            for index, value in enumerate(self.loader.load_all(stream)):
                if value is None:
                    logger.debug("Skipping empty document #%d", index)
                    continue
                documents.append(dump_document(strip_comments(value), self.dumper))
        except YAMLError as e:
            raise DecodeError(f"Invalid YAML near document #{index}: {e}") from e
        return documents


def split_documents(stream: Union[str, bytes]) -> List[str]:
    """Convenience wrapper around DocumentSplitter().split()."""
    return DocumentSplitter().split(stream)
