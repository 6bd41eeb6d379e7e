"""Tests for shape validation utilities."""

from shape_transformer.utils.validation import ShapeValidation
from shape_transformer.types import ArrayOf, ErrorType, Field, Leaf, RecordOf


class TestShapeValidation:
    """Tests for ShapeValidation class."""

    def test_validate_valid_shape(self, user_shape):
        """Test validation of a well-formed shape."""
        result = ShapeValidation.validate_shape(user_shape)

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_validate_unknown_kind(self):
        """Test that unrecognized nodes are errors with their location."""
        shape = RecordOf({
            "profile": Field(RecordOf({"name": Field("string")})),
        })

        result = ShapeValidation.validate_shape(shape)

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.KIND
        assert result.errors[0].location == "profile.name"
        assert "str" in result.errors[0].message

    def test_validate_unknown_root(self):
        """Test that an unrecognized root is reported at the root."""
        result = ShapeValidation.validate_shape({"kind": "leaf"})

        assert not result.is_valid
        assert result.errors[0].location == "root"

    def test_validate_entry_not_a_field(self):
        """Test that record entries must be Field instances."""
        shape = RecordOf({"id": Leaf("number")})

        result = ShapeValidation.validate_shape(shape)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE
        assert result.errors[0].location == "id"

    def test_validate_array_element(self):
        """Test that array elements are validated."""
        result = ShapeValidation.validate_shape(ArrayOf(None))

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.KIND

    def test_circular_reference_warning(self, linked_list_shape):
        """Test that self-references are reported as warnings only."""
        result = ShapeValidation.validate_shape(linked_list_shape)

        assert result.is_valid
        assert any("Circular shape reference at 'next'" in w for w in result.warnings)

    def test_depth_budget_warning(self):
        """Test warning for nesting deeper than the depth budget."""
        shape = Leaf("string")
        for i in range(7):
            shape = RecordOf({f"level_{i}": Field(shape)})

        result = ShapeValidation.validate_shape(shape, depth=5)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "exceeds depth budget 5" in result.warnings[0]

    def test_depth_within_budget(self, user_shape):
        """Test that nesting equal to the budget is accepted silently."""
        result = ShapeValidation.validate_shape(user_shape, depth=3)

        assert result.warnings == []

    def test_unaddressable_field_name(self):
        """Test warning for field names containing the path separator."""
        shape = RecordOf({"a.b": Field(Leaf("string"))})

        result = ShapeValidation.validate_shape(shape)

        assert result.is_valid
        assert "'a.b'" in result.warnings[0]

    def test_max_depth_calculation(self, user_shape, self_ref_shape):
        """Test maximum depth calculation."""
        assert ShapeValidation._calculate_max_depth(Leaf("x"), set()) == 0
        assert ShapeValidation._calculate_max_depth(RecordOf({}), set()) == 0
        assert ShapeValidation._calculate_max_depth(user_shape, set()) == 3
        assert ShapeValidation._calculate_max_depth(self_ref_shape, set()) == 1
