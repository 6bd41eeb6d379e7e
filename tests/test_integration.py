"""Integration tests for the public Shape Transformer API."""

import shape_transformer
from shape_transformer import (
    ArrayOf,
    Field,
    Leaf,
    NotFound,
    RecordOf,
    ShapeDetector,
    deep_intersection,
    deep_mutable,
    deep_partial,
    deep_readonly,
    deep_required,
    paths,
    resolve,
    shape_from_dict,
    shape_to_dict,
)


class TestPublicAPI:
    """End-to-end tests through the module-level functions."""

    def test_user_shape_end_to_end(self, user_shape):
        """Test enumeration, resolution and partial rewrite of a nested record."""
        assert paths(user_shape, 5) == {
            "id",
            "profile",
            "profile.name",
            "profile.address",
            "profile.address.city",
            "profile.address.zip",
        }
        assert resolve(user_shape, "profile.address.city") == Leaf("string")

        partial = deep_partial(user_shape)
        for path in paths(partial):
            parent, _, name = path.rpartition(".")
            container = resolve(partial, parent)
            assert container.fields[name].optional, path

    def test_partial_then_required_restores(self, user_shape):
        """Test that deep_required undoes deep_partial on a required shape."""
        assert deep_required(deep_partial(user_shape)) == user_shape

    def test_readonly_then_mutable_resets(self, user_shape):
        """Test that deep_mutable resets a deep_readonly shape."""
        assert deep_mutable(deep_readonly(user_shape)) == deep_mutable(user_shape)

    def test_array_pass_through(self, tagged_shape):
        """Test that readonly flags the array field and not its element."""
        result = deep_readonly(tagged_shape)

        assert result.fields["tags"].readonly
        assert result.fields["tags"].shape == ArrayOf(Leaf("string"))

    def test_intersection_asymmetry(self):
        """Test that primary fields are kept and secondary fills gaps."""
        primary = RecordOf({"a": Field(Leaf("int"))})
        secondary = RecordOf({"a": Field(Leaf("string")), "b": Field(Leaf("bool"))})

        assert deep_intersection(primary, secondary) == RecordOf({
            "a": Field(Leaf("int")),
            "b": Field(Leaf("bool")),
        })

    def test_self_referential_paths_terminate(self, self_ref_shape):
        """Test enumeration of a self-referential record."""
        result = paths(self_ref_shape, 2)

        assert result == {"self", "self.self", "self.self.self"}
        for path in result:
            assert resolve(self_ref_shape, path) is self_ref_shape

    def test_not_found_is_distinct_from_truncation(self, self_ref_shape):
        """Test that a path beyond the enumeration budget still resolves."""
        assert "self.self.self.self" not in paths(self_ref_shape, 2)
        assert not isinstance(resolve(self_ref_shape, "self.self.self.self"), NotFound)
        assert isinstance(resolve(self_ref_shape, "self.other"), NotFound)

    def test_detected_shape_workflow(self):
        """Test detecting a shape, rewriting it and exchanging it as a dict."""
        sample = {
            "id": 7,
            "tags": ["a", "b"],
            "owner": {"name": "Alice", "notify": print},
        }

        shape = ShapeDetector().detect_shape(sample)
        readonly = deep_readonly(shape)
        restored = shape_from_dict(shape_to_dict(readonly))

        assert restored == readonly
        assert paths(restored) == {"id", "tags", "owner", "owner.name", "owner.notify"}
        assert resolve(restored, "owner.notify") == Leaf("function", opaque=True)
        assert restored.fields["owner"].shape.fields["notify"].readonly

    def test_version(self):
        """Test that the package exposes its version."""
        assert shape_transformer.__version__ == "1.0.0"
