#!/usr/bin/env python3
"""
Example usage of the Shape Transformer.

This script describes a nested user record, enumerates and resolves its
paths, and applies the deep rewrites to it.
"""

import json
import logging

from shape_transformer import (
    ArrayOf,
    Field,
    Leaf,
    RecordOf,
    ShapeValidation,
    deep_intersection,
    deep_partial,
    deep_readonly,
    paths,
    resolve,
    shape_to_dict,
)


def main():
    """Main example function."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("Shape Transformer Example")
    print("=" * 50)

    user = RecordOf({
        "id": Field(Leaf("number")),
        "profile": Field(RecordOf({
            "name": Field(Leaf("string")),
            "address": Field(RecordOf({
                "city": Field(Leaf("string")),
                "zip": Field(Leaf("number")),
            })),
        })),
        "tags": Field(ArrayOf(Leaf("string"))),
        "on_change": Field(Leaf("function", opaque=True)),
    })

    validation = ShapeValidation.validate_shape(user)
    print(f"Valid: {validation.is_valid}, warnings: {validation.warnings}")

    print("\nPaths:")
    for path in sorted(paths(user)):
        print(f"  {path}")

    print(f"\nprofile.address.city -> {resolve(user, 'profile.address.city')}")
    print(f"profile.email        -> {resolve(user, 'profile.email')}")

    print("\nDeep partial:")
    print(json.dumps(shape_to_dict(deep_partial(user)), indent=2))

    print("\nDeep readonly of tags:")
    print(deep_readonly(user).fields["tags"])

    audit = RecordOf({"updated_at": Field(Leaf("string"), optional=True)})
    merged = deep_intersection(user, audit)
    print("\nPaths after merging audit fields:")
    for path in sorted(paths(merged)):
        print(f"  {path}")


if __name__ == "__main__":
    main()
