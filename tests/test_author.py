import io

from bibliodata.author import Author


def test_constructor_initializes_name_and_surname():
    author = Author("John", "Doe")
    assert author.name == "John"
    assert author.surname == "Doe"


def test_name_returns_the_name():
    assert Author("John", "Doe").name == "John"


def test_surname_returns_the_surname():
    assert Author("John", "Doe").surname == "Doe"


def test_str_returns_full_name():
    assert str(Author("John", "Doe")) == "John Doe"


def test_display_writes_full_name_to_stdout(capsys):
    Author("John", "Doe").display()
    assert capsys.readouterr().out == "John Doe\n"


def test_display_writes_to_given_stream():
    buffer = io.StringIO()
    Author("John", "Doe").display(buffer)
    assert buffer.getvalue() == "John Doe\n"


def test_default_author_is_empty():
    author = Author()
    assert author.name == ""
    assert author.surname == ""


def test_equality_compares_name_and_surname():
    assert Author("John", "Doe") == Author("John", "Doe")
    assert not Author("John", "Doe") == Author("Jane", "Doe")
    assert not Author("John", "Doe") == Author("John", "Smith")


def test_fields_can_be_changed():
    author = Author("John", "Doe")
    author.name = "Jane"
    author.surname = "Smith"
    assert str(author) == "Jane Smith"