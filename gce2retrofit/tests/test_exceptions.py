"""Test suite for gce2retrofit exceptions."""

import pytest

from gce2retrofit.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    DocumentError,
    DocumentLoadError,
    Gce2RetrofitError,
    MissingParameterError,
    OutputCollisionError,
    OutputError,
    ParseError,
    UnsupportedTypeError,
)


class TestGce2RetrofitError:
    """Tests for the base Gce2RetrofitError exception."""

    def test_basic_message(self):
        error = Gce2RetrofitError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    @pytest.mark.parametrize(
        'error',
        [
            DocumentLoadError('compute.json'),
            ParseError('compute.json'),
            UnsupportedTypeError('object'),
            MissingParameterError('zone'),
            ConfigurationError('bad'),
            OutputError('out/A.java'),
            OutputCollisionError('out/A.java'),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, Gce2RetrofitError)


class TestDocumentErrors:
    """Tests for document loading and parsing errors."""

    def test_load_error_with_cause(self):
        cause = FileNotFoundError('No such file')
        error = DocumentLoadError('compute.json', cause=cause)

        assert isinstance(error, DocumentError)
        assert error.source == 'compute.json'
        assert error.cause is cause
        assert str(error) == (
            "Failed to load discovery document from 'compute.json': No such file"
        )

    def test_parse_error_lists_errors(self):
        error = ParseError('compute.json', errors=['baseUrl: Field required', 'x'])

        assert isinstance(error, DocumentError)
        assert error.errors == ['baseUrl: Field required', 'x']
        assert str(error) == (
            "Malformed discovery document 'compute.json': "
            'baseUrl: Field required; x'
        )

    def test_parse_error_without_errors(self):
        error = ParseError('compute.json')

        assert error.errors == []
        assert str(error) == "Malformed discovery document 'compute.json'"


class TestCodeGenerationErrors:
    """Tests for errors raised while generating sources."""

    def test_context_and_cause(self):
        error = CodeGenerationError(
            'Failed', context='Instance', cause=ValueError('boom')
        )

        assert str(error) == 'Failed (while generating Instance): boom'

    def test_unsupported_type(self):
        error = UnsupportedTypeError('object', context='Instance.labels')

        assert isinstance(error, CodeGenerationError)
        assert error.type_name == 'object'
        assert error.context == 'Instance.labels'
        assert str(error) == (
            "Unsupported type 'object' (while generating Instance.labels)"
        )

    def test_missing_parameter(self):
        error = MissingParameterError('zone', method='list')

        assert isinstance(error, CodeGenerationError)
        assert error.parameter == 'zone'
        assert error.method == 'list'
        assert "'zone'" in str(error)
        assert str(error).endswith('(while generating list)')


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_path_and_field(self):
        error = ConfigurationError(
            'Invalid configuration', config_path='apis.yaml', field='documents'
        )

        assert error.config_path == 'apis.yaml'
        assert error.field == 'documents'
        assert str(error) == (
            "Invalid configuration in 'apis.yaml' (field: documents)"
        )


class TestOutputErrors:
    """Tests for output errors."""

    def test_output_error(self):
        error = OutputError('out/A.java', cause=PermissionError('denied'))

        assert error.output_path == 'out/A.java'
        assert str(error) == "Failed to write output to 'out/A.java': denied"

    def test_collision(self):
        error = OutputCollisionError('out/A.java')

        assert isinstance(error, OutputError)
        assert isinstance(error.cause, FileExistsError)
        assert error.output_path == 'out/A.java'
