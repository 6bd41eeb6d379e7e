"""Pytest configuration and fixtures."""

import pytest

from shape_transformer.types import ArrayOf, Field, Leaf, RecordOf


@pytest.fixture
def user_shape():
    """Nested user record: id, profile.name, profile.address.{city,zip}."""
    return RecordOf({
        "id": Field(Leaf("number")),
        "profile": Field(RecordOf({
            "name": Field(Leaf("string")),
            "address": Field(RecordOf({
                "city": Field(Leaf("string")),
                "zip": Field(Leaf("number")),
            })),
        })),
    })


@pytest.fixture
def flagged_shape():
    """Record mixing optional and readonly fields, with an array of records."""
    return RecordOf({
        "id": Field(Leaf("number"), optional=True, readonly=True),
        "callback": Field(Leaf("function", opaque=True), readonly=True),
        "items": Field(ArrayOf(RecordOf({
            "sku": Field(Leaf("string"), optional=True),
            "qty": Field(Leaf("number"), readonly=True),
        })), optional=True),
        "meta": Field(RecordOf({
            "note": Field(Leaf("string"), optional=True, readonly=True),
        })),
    })


@pytest.fixture
def tagged_shape():
    """Record holding an array of leaves."""
    return RecordOf({"tags": Field(ArrayOf(Leaf("string")))})


@pytest.fixture
def self_ref_shape():
    """Record whose only field refers back to the record itself."""
    return RecordOf.recursive(lambda rec: {"self": Field(rec)})


@pytest.fixture
def linked_list_shape():
    """Self-referential record with a leaf alongside the cycle."""
    return RecordOf.recursive(lambda node: {
        "value": Field(Leaf("number")),
        "next": Field(node, optional=True),
    })
