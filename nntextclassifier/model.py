from .errors import InvalidArgumentError


class VocabularyWord:
    """
    A known word. The id is the word's coordinate in a text vector (id - 1);
    equality only looks at the text.
    """
    __slots__ = ('_id', '_text')

    def __init__(self, id, text):
        object.__setattr__(self, '_id', id)
        object.__setattr__(self, '_text', text)

    @property
    def id(self):
        return self._id

    @property
    def text(self):
        return self._text

    def __setattr__(self, name, value):
        raise AttributeError("VocabularyWord is immutable")

    def __eq__(self, other):
        if not isinstance(other, VocabularyWord):
            return NotImplemented
        return self._text == other._text

    def __hash__(self):
        return hash(self._text)

    def __repr__(self):
        return f"VocabularyWord({self._id}, {self._text!r})"


class Vocabulary:
    """
    Ordered, read-only list of VocabularyWord with lookup by text.
    Shared between recognizers, never mutated after construction.
    """
    def __init__(self, words):
        self._words = tuple(words)
        self._by_text = {}

        size = len(self._words)
        seen_ids = set()
        for word in self._words:
            if not isinstance(word.id, int) or not 1 <= word.id <= size:
                raise InvalidArgumentError(f"Vocabulary id {word.id!r} for {word.text!r} is outside 1..{size}")
            if word.id in seen_ids:
                raise InvalidArgumentError(f"Duplicate vocabulary id {word.id}")
            if word.text in self._by_text:
                raise InvalidArgumentError(f"Duplicate vocabulary word {word.text!r}")
            seen_ids.add(word.id)
            self._by_text[word.text] = word

    @classmethod
    def from_mapping(cls, mapping):
        """Build from {text: id}."""
        return cls(VocabularyWord(word_id, text) for text, word_id in mapping.items())

    def find(self, text):
        """Returns the VocabularyWord for text, or None."""
        return self._by_text.get(text)

    def size(self):
        return len(self._words)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, text):
        return text in self._by_text

    def __repr__(self):
        return f"Vocabulary(size={len(self._words)})"


class CharacteristicValue:
    """One discrete outcome of a Characteristic; id is its 1-based output coordinate."""
    def __init__(self, id, value):
        self.id = id
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, CharacteristicValue):
            return NotImplemented
        return self.id == other.id and self.value == other.value

    def __hash__(self):
        return hash((self.id, self.value))

    def __repr__(self):
        return f"CharacteristicValue({self.id}, {self.value!r})"

    def __str__(self):
        return self.value


class Characteristic:
    """A classification target, e.g. 'call topic', with its possible values."""
    def __init__(self, name, possible_values=None):
        self.name = name
        self.possible_values = list(possible_values) if possible_values is not None else None

    def find_value(self, value_id):
        for value in self.possible_values or ():
            if value.id == value_id:
                return value
        return None

    def __eq__(self, other):
        if not isinstance(other, Characteristic):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"Characteristic({self.name!r}, {len(self.possible_values or ())} values)"


class IncomingCall:
    """A labeled text record used for training."""
    def __init__(self, text, characteristics=None):
        self.text = text
        self.characteristics = dict(characteristics or {})

    def get_characteristic_value(self, characteristic):
        return self.characteristics.get(characteristic)

    def __repr__(self):
        return f"IncomingCall({self.text!r})"
