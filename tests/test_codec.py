import pytest
from pydantic import BaseModel

from frontmatter_stream.errors import DecodeError
from frontmatter_stream.utils.codec import YamlCodec


class Post(BaseModel):
	title: str
	draft: bool = False


def test_decode_mapping():
	assert YamlCodec().decode(b"a: 1\nb: [x, y]\n") == {"a": 1, "b": ["x", "y"]}


def test_decode_empty_is_empty_mapping():
	assert YamlCodec().decode(b"") == {}
	assert YamlCodec().decode(b"# only a comment\n") == {}


def test_decode_scalar_is_rejected():
	with pytest.raises(DecodeError):
		YamlCodec().decode(b"just a string")


def test_decode_syntax_error():
	with pytest.raises(DecodeError) as exc_info:
		YamlCodec().decode(b"a: [1, 2\n")
	assert exc_info.value.__cause__ is not None


def test_decode_into_model_ignores_extra_keys():
	post = YamlCodec().decode_into(b"fmtype: post\ntitle: Hi\ndraft: true\n",
	                               Post)
	assert post == Post(title="Hi", draft=True)


def test_decode_into_dict_type():
	assert YamlCodec().decode_into(b"a: 1\n", dict[str, int]) == {"a": 1}


def test_decode_into_validation_error():
	with pytest.raises(DecodeError, match="Post"):
		YamlCodec().decode_into(b"draft: maybe\n", Post)


class Plain:

	def __init__(self, title):
		self.title = title


def test_decode_into_unsupported_shape():
	with pytest.raises(DecodeError, match="unsupported frontmatter shape"):
		YamlCodec().decode_into(b"title: x\n", Plain)
