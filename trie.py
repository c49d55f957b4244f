import argparse
import logging
from typing import Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26  # lowercase English letters 'a' through 'z'


class InvalidCharacterError(ValueError):
    """
    Raised when a word contains a character outside 'a'-'z'.

    Attributes:
        word (str): The rejected input.
        char (str): The first offending character.
        position (int): Index of char within word.
    """

    def __init__(self, word: str, char: str, position: int):
        super().__init__(
            f"character {char!r} at position {position} of {word!r} is not a lowercase English letter"
        )
        self.word = word
        self.char = char
        self.position = position


def index_to_char(i: int) -> str:
    if 0 <= i < ALPHABET_SIZE:
        return chr(ord("a") + i)
    raise IndexError(f"child slot {i} out of range")


def _slots(word: str) -> List[int]:
    """Map each letter of word to its child slot (0-25)."""
    slots = []
    for pos, ch in enumerate(word):
        if not "a" <= ch <= "z":
            raise InvalidCharacterError(word, ch, pos)
        slots.append(ord(ch) - ord("a"))
    return slots


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (list[TrieNode | None]):
            Fixed array of ALPHABET_SIZE slots, one per letter.
        is_end_of_word (bool):
            True if this node marks the end of a valid word.
    """
    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: List[Optional["TrieNode"]] = [None] * ALPHABET_SIZE
        self.is_end_of_word = False

    def has_children(self) -> bool:
        return any(child is not None for child in self.children)


class Trie:
    """
    A trie (prefix tree) over lowercase English letters supporting
    insertion, search, prefix checks, soft or pruning deletion, and
    sorted prefix-based retrieval.

    Any character outside 'a'-'z' raises InvalidCharacterError.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        """Initialize a trie, optionally seeded with words."""
        self.root = TrieNode()
        self._size = 0
        if words is not None:
            for word in words:
                self.insert(word)

    def _find(self, word: str) -> Optional[TrieNode]:
        node = self.root
        for idx in _slots(word):
            node = node.children[idx]
            if node is None:
                return None
        return node

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.

        Args:
            word (str): The word to insert.

        Raises:
            InvalidCharacterError: If word has a non-lowercase character.
                The trie is left unchanged.
        """
        node = self.root
        created = 0
        for idx in _slots(word):
            if node.children[idx] is None:
                node.children[idx] = TrieNode()
                created += 1
            node = node.children[idx]
        if not node.is_end_of_word:
            node.is_end_of_word = True
            self._size += 1
        logger.debug("inserted %r (%d new nodes)", word, created)

    def search(self, word: str) -> bool:
        """
        Determine whether a word exists in the trie.

        Args:
            word (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise
                  (a prefix of a stored word is not a hit).
        """
        node = self._find(word)
        return node is not None and node.is_end_of_word

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if the path for prefix exists.
        """
        return self._find(prefix) is not None

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def delete(self, word: str, prune: bool = False) -> bool:
        """
        Delete a word from the trie.

        By default this is a soft delete: the end-of-word flag is cleared
        and every node stays allocated. With prune=True, nodes on the
        word's path that end up childless and non-terminal are removed,
        deepest first.

        Args:
            word (str): The word to delete.
            prune (bool): Also remove dead nodes along the path.

        Returns:
            bool: True if the word was deleted,
                  False if the word was not present.
        """
        path = [self.root]
        slots = _slots(word)
        for idx in slots:
            child = path[-1].children[idx]
            if child is None:
                return False
            path.append(child)

        node = path[-1]
        if not node.is_end_of_word:
            return False
        node.is_end_of_word = False
        self._size -= 1

        pruned = 0
        if prune:
            for depth in range(len(slots), 0, -1):
                node = path[depth]
                if node.is_end_of_word or node.has_children():
                    break
                path[depth - 1].children[slots[depth - 1]] = None
                pruned += 1
        logger.debug("deleted %r (pruned %d nodes)", word, pruned)
        return True

    def collect_all_words_starting_with(self, prefix: str) -> List[str]:
        """
        Retrieve all words in the trie that share a given prefix.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: All words that begin with the prefix,
                       in lexicographic order.
        """
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def _walk(self, node: TrieNode, prefix: str) -> Iterator[str]:
        # Children are pushed z..a so they pop a..z and words come out sorted.
        stack = [(node, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_end_of_word:
                yield word
            for i in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[i]
                if child is not None:
                    stack.append((child, word + index_to_char(i)))

    def node_count(self) -> int:
        """Number of allocated nodes, root included."""
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(child for child in node.children if child is not None)
        return count

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word) -> bool:
        if not isinstance(word, str):
            return False
        try:
            return self.search(word)
        except InvalidCharacterError:
            return False

    def __iter__(self) -> Iterator[str]:
        """
        Iterate over all words stored in the trie.

        Yields:
            str: Next word in lexicographic order.
        """
        yield from self._walk(self.root, "")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Lowercase prefix trie demo")
    parser.add_argument(
        "words",
        nargs="*",
        default=["cat", "car", "card", "apple", "app", "application"],
        help="Words to insert",
    )
    parser.add_argument("--prefix", default="app", help="Prefix to enumerate (default: app)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log trie mutations")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-6s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    t = Trie()
    for word in args.words:
        try:
            t.insert(word)
        except InvalidCharacterError as exc:
            print(f"Rejected: {exc}")

    for word in ("cat", "car", "apple", "app", "card", "ca", "cow"):
        print(f"Search {word!r}:", t.search(word))
    for prefix in ("ca", "app", "co"):
        print(f"Starts with {prefix!r}:", t.starts_with(prefix))

    print(f"Words starting with {args.prefix!r}:", t.collect_all_words_starting_with(args.prefix))
    print("Words starting with 'z':", t.collect_all_words_starting_with("z"))

    print("Delete 'app':", t.delete("app"))
    print("Search 'app' after delete:", t.search("app"))
    print("Search 'apple' after 'app' delete:", t.search("apple"))
    print("Delete 'nonexistent':", t.delete("nonexistent"))

    try:
        t.insert("ApPle")
    except InvalidCharacterError as exc:
        print(f"Rejected: {exc}")


# --- Usage Example ---
if __name__ == "__main__":
    main()
