from _rlparse.reader.errors import PushbackError


class Cursor:
    """
    A read position over an immutable source string, moving one
    character (codepoint) at a time with one character of pushback.

    >>> cursor = Cursor("ab")
    >>> cursor.read()
    'a'
    >>> cursor.peek()
    'b'
    >>> cursor.unread()
    >>> cursor.read()
    'a'

    """

    def __init__(self, source):
        """
        :param source: The str to read from. It is never modified.
        """
        self.source = source
        self._position = 0
        self._unread_budget = 0

    @property
    def position(self):
        return self._position

    def at_end(self):
        return self._position == len(self.source)

    def peek(self):
        """
        :returns: The character at the current position, or None at the
            end of the source.
        """
        if self.at_end():
            return None
        return self.source[self._position]

    def read(self):
        """
        Read the character at the current position and move past it.
        At the end of the source, None is returned and the position
        does not change.
        """
        char = self.peek()
        if char is not None:
            self._position += 1
            self._unread_budget += 1
        return char

    def unread(self):
        """
        Step back over the previously read character. May be called at
        most once for each character read.

        :raises PushbackError: If there is no read character to step back
            over.
        """
        if self._unread_budget == 0:
            raise PushbackError(
                f"unread at {self._position} does not follow a read character"
            )
        self._position -= 1
        self._unread_budget -= 1
