"""Serialization and deserialization utilities for structured definitions."""

import json
from typing import Any

from ..models.document import BlockNode, ListItem, Paragraph, StructuredDocument
from ..models.enums import NodeKind


class DocumentSerializer:
    """
    Handles conversion of StructuredDocument to and from plain data.

    The dictionary form is what the HTTP API returns:
    {"nodes": [{"type": "paragraph", "text": ...},
               {"type": "list_item", "text": ..., "level": 1}]}
    """

    @staticmethod
    def serialize(doc: StructuredDocument) -> str:
        """
        Serialize a StructuredDocument to JSON string.

        Args:
            doc: The StructuredDocument to serialize.

        Returns:
            JSON string representation of the document.
        """
        return json.dumps(
            DocumentSerializer.to_dict(doc),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def deserialize(json_str: str) -> StructuredDocument:
        """
        Deserialize a JSON string to a StructuredDocument.

        Raises:
            ValueError: If the JSON is invalid or malformed.
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {str(e)}")

        return DocumentSerializer.from_dict(data)

    @staticmethod
    def to_dict(doc: StructuredDocument) -> dict[str, Any]:
        """Convert StructuredDocument to dictionary."""
        return {"nodes": [DocumentSerializer._node_to_dict(n) for n in doc.nodes]}

    @staticmethod
    def from_dict(data: dict[str, Any]) -> StructuredDocument:
        """Convert dictionary to StructuredDocument."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for StructuredDocument")
        if "nodes" not in data:
            raise ValueError("Missing required field: nodes")
        if not isinstance(data["nodes"], list):
            raise ValueError("'nodes' must be a list")

        return StructuredDocument(
            nodes=tuple(DocumentSerializer._dict_to_node(n) for n in data["nodes"])
        )

    @staticmethod
    def _node_to_dict(node: BlockNode) -> dict[str, Any]:
        result: dict[str, Any] = {"type": node.kind.value, "text": node.text}
        if isinstance(node, ListItem):
            result["level"] = node.level
        return result

    @staticmethod
    def _dict_to_node(data: dict[str, Any]) -> BlockNode:
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for block node")

        for field in ("type", "text"):
            if field not in data:
                raise ValueError(f"Missing required field: {field}")

        try:
            kind = NodeKind(data["type"])
        except ValueError:
            raise ValueError(f"Unknown node type: {data['type']}")

        if kind is NodeKind.PARAGRAPH:
            return Paragraph(text=data["text"])
        return ListItem(text=data["text"], level=data.get("level", 1))
