"""Test the mapping of discovery type descriptors to Java types."""

import pytest

from gce2retrofit.codegen.types import TypeMapper, box
from gce2retrofit.discovery import (
    ArrayType,
    ParameterType,
    PrimitiveType,
    ReferenceType,
)
from gce2retrofit.exceptions import UnsupportedTypeError


@pytest.fixture
def mapper():
    return TypeMapper()


class TestMap:
    """Test TypeMapper.map."""

    @pytest.mark.parametrize(
        'type_name, java_type',
        [
            ('string', 'String'),
            ('integer', 'int'),
            ('number', 'double'),
            ('boolean', 'boolean'),
        ],
    )
    def test_primitives(self, mapper, type_name, java_type):
        assert mapper.map(PrimitiveType(type=type_name)) == java_type

    def test_format_does_not_change_primitive(self, mapper):
        descriptor = PrimitiveType(type='string', format='uint64')
        assert mapper.map(descriptor) == 'String'

    def test_reference_is_schema_id(self, mapper):
        assert mapper.map(ReferenceType(ref='Instance')) == 'Instance'

    def test_array_wraps_element_type(self, mapper):
        descriptor = ArrayType(items=PrimitiveType(type='string'))
        assert mapper.map(descriptor) == 'List<String>'

    def test_array_of_references(self, mapper):
        descriptor = ArrayType(items=ReferenceType(ref='AttachedDisk'))
        assert mapper.map(descriptor) == 'List<AttachedDisk>'

    def test_array_boxes_primitive_elements(self, mapper):
        descriptor = ArrayType(items=PrimitiveType(type='integer'))
        assert mapper.map(descriptor) == 'List<Integer>'

    def test_nested_arrays(self, mapper):
        descriptor = ArrayType(items=ArrayType(items=PrimitiveType(type='boolean')))
        assert mapper.map(descriptor) == 'List<List<Boolean>>'

    def test_unknown_primitive_raises(self, mapper):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            mapper.map(PrimitiveType(type='any'), context='Instance.labels')

        assert exc_info.value.type_name == 'any'
        assert 'Instance.labels' in str(exc_info.value)

    def test_unknown_array_element_raises(self, mapper):
        with pytest.raises(UnsupportedTypeError):
            mapper.map(ArrayType(items=PrimitiveType(type='object')))

    def test_custom_primitive_table(self):
        mapper = TypeMapper({'string': 'CharSequence', 'integer': 'long'})
        assert mapper.map(PrimitiveType(type='string')) == 'CharSequence'
        assert mapper.map(PrimitiveType(type='integer')) == 'long'


class TestMapParameter:
    """Test TypeMapper.map_parameter."""

    @pytest.mark.parametrize(
        'type_name, required_type, optional_type',
        [
            ('string', 'String', 'String'),
            ('integer', 'int', 'Integer'),
            ('number', 'double', 'Double'),
            ('boolean', 'boolean', 'Boolean'),
        ],
    )
    def test_optional_primitives_are_boxed(
        self, mapper, type_name, required_type, optional_type
    ):
        required = ParameterType(descriptor=PrimitiveType(type=type_name), required=True)
        optional = ParameterType(descriptor=PrimitiveType(type=type_name))

        assert mapper.map_parameter(required) == required_type
        assert mapper.map_parameter(optional) == optional_type

    def test_arrays_ignore_required_flag(self, mapper):
        descriptor = ArrayType(items=PrimitiveType(type='string'))
        required = ParameterType(descriptor=descriptor, required=True)
        optional = ParameterType(descriptor=descriptor, required=False)

        assert mapper.map_parameter(required) == 'List<String>'
        assert mapper.map_parameter(optional) == 'List<String>'

    def test_references_ignore_required_flag(self, mapper):
        descriptor = ReferenceType(ref='Instance')
        required = ParameterType(descriptor=descriptor, required=True)
        optional = ParameterType(descriptor=descriptor, required=False)

        assert mapper.map_parameter(required) == 'Instance'
        assert mapper.map_parameter(optional) == 'Instance'

    def test_parsed_parameter(self, mapper):
        parameter = ParameterType.model_validate(
            {'type': 'integer', 'location': 'query', 'default': '500'}
        )
        assert mapper.map_parameter(parameter) == 'Integer'


class TestBox:
    """Test the box helper."""

    def test_box_primitives(self):
        assert box('int') == 'Integer'
        assert box('long') == 'Long'
        assert box('char') == 'Character'

    def test_box_leaves_objects_alone(self):
        assert box('String') == 'String'
        assert box('List<String>') == 'List<String>'
