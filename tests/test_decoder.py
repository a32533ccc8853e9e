"""Tests for lazy metadata decoding."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from frontmatter_stream.core.decoder import decode_record, decode_typed
from frontmatter_stream.core.scanner import ParserState
from frontmatter_stream.errors import DecodeError, FrontmatterStateError
from frontmatter_stream.models.metadata import MetadataRecord
from frontmatter_stream.utils.codec import YamlCodec


class Post(BaseModel):
	title: str
	tags: list[str] = []


@dataclass
class Note:
	foo: str


def _parsed(block: bytes, factory=None) -> ParserState:
	state = ParserState.from_pairs(factory=factory)
	assert state.parse(b"---\n" + block + b"\n---\n") == b""
	assert state.parsed
	return state


def test_decode_record_reads_discriminator():
	raw = b"fmtype: test\nfoo: bar\n"
	record = decode_record(raw, YamlCodec())
	assert record.discriminator == "test"
	assert record.raw == raw
	assert record.data == {"fmtype": "test", "foo": "bar"}
	assert record.template is None


def test_metadata_record_from_stream():
	state = _parsed(b"fmtype: test\nfoo: bar")
	record = state.metadata_record()
	assert record.discriminator == "test"
	assert record.raw == b"fmtype: test\nfoo: bar"


def test_metadata_record_is_cached():
	state = _parsed(b"fmtype: test")
	assert state.metadata_record() is state.metadata_record()


def test_missing_discriminator_is_empty():
	record = _parsed(b"template: foo.tmpl").metadata_record()
	assert record.discriminator == ""
	assert record.template == "foo.tmpl"


def test_null_discriminator_is_empty():
	record = _parsed(b"fmtype:\nfoo: 1").metadata_record()
	assert record.discriminator == ""


def test_numeric_discriminator_becomes_string():
	record = _parsed(b"fmtype: 2").metadata_record()
	assert record.discriminator == "2"


def test_empty_block_decodes_to_empty_record():
	state = ParserState.from_pairs()
	assert state.parse(b"---\n\n---\nbody") == b"body"
	record = state.metadata_record()
	assert record.discriminator == ""
	assert record.data == {}


def test_malformed_yaml_raises_and_is_not_cached():
	state = _parsed(b"foo: [unclosed")
	with pytest.raises(DecodeError):
		state.metadata_record()
	with pytest.raises(DecodeError):
		state.metadata_record()


def test_non_mapping_block_raises():
	state = _parsed(b"- a\n- b")
	with pytest.raises(DecodeError, match="mapping"):
		state.metadata_record()


def test_wrongly_typed_template_raises():
	state = _parsed(b"template: [a, b]")
	with pytest.raises(DecodeError):
		state.metadata_record()


def test_decoder_before_parse_raises():
	state = ParserState.from_pairs()
	state.parse(b"---\nstill open")
	with pytest.raises(FrontmatterStateError):
		state.metadata_record()
	with pytest.raises(FrontmatterStateError):
		state.typed_value()


class TestTypedValue:
	"""Tests for typed_value() and the shape factory."""

	def test_passes_discriminator_to_factory(self):
		calls = []

		def factory(fmtype):
			calls.append(fmtype)
			return None

		_parsed(b"fmtype: t\nfoo: bar", factory).typed_value()
		assert "t" in calls

	def test_declined_shape_is_cached(self):
		calls = []

		def factory(fmtype):
			calls.append(fmtype)
			return None

		state = _parsed(b"fmtype: test\nfoo: bar", factory)
		assert state.typed_value() is None
		assert state.typed_value() is None
		assert calls == ["test"]

	def test_decodes_into_model(self):
		state = _parsed(b"fmtype: post\ntitle: Hello\ntags: [a, b]",
		                lambda fmtype: Post)
		value = state.typed_value()
		assert isinstance(value, Post)
		assert value.title == "Hello"
		assert value.tags == ["a", "b"]
		assert state.typed_value() is value

	def test_decodes_into_dataclass(self):
		value = _parsed(b"fmtype: t\nfoo: bar", lambda fmtype: Note).typed_value()
		assert value == Note(foo="bar")

	def test_shape_mismatch_raises_and_retries(self):
		calls = []

		def factory(fmtype):
			calls.append(fmtype)
			return Post

		state = _parsed(b"fmtype: post\nbody: no title", factory)
		with pytest.raises(DecodeError, match="Post"):
			state.typed_value()
		with pytest.raises(DecodeError):
			state.typed_value()
		assert len(calls) == 2

	def test_factory_error_is_wrapped(self):

		def factory(fmtype):
			raise KeyError(fmtype)

		state = _parsed(b"fmtype: unknown", factory)
		with pytest.raises(DecodeError) as exc_info:
			state.typed_value()
		assert isinstance(exc_info.value.__cause__, KeyError)

	def test_without_factory_is_untyped(self):
		assert _parsed(b"fmtype: post\ntitle: x").typed_value() is None

	def test_reset_clears_typed_cache(self):
		calls = []

		def factory(fmtype):
			calls.append(fmtype)
			return None

		state = _parsed(b"fmtype: a", factory)
		state.typed_value()
		state.reset()
		state.parse(b"---\nfmtype: b\n---\n")
		state.typed_value()
		assert calls == ["a", "b"]


def test_decode_typed_with_record():
	record = MetadataRecord(fmtype="post", raw=b"title: x\n")
	value = decode_typed(record, lambda fmtype: Post, YamlCodec())
	assert value == Post(title="x")


def test_decode_typed_without_factory():
	record = MetadataRecord(raw=b"title: x\n")
	assert decode_typed(record, None, YamlCodec()) is None


class Plain:
	"""A class pydantic cannot build a validator for."""

	def __init__(self, title):
		self.title = title


def test_unsupported_shape_raises_decode_error():
	state = _parsed(b"title: x", lambda fmtype: Plain)
	with pytest.raises(DecodeError, match="Plain") as exc_info:
		state.typed_value()
	assert exc_info.value.__cause__ is not None
	# the untyped record is still available
	assert state.metadata_record().data == {"title": "x"}
