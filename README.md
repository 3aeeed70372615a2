# minishell

An interactive shell prompt that splits each command line into shell tokens
and prints them. It recognises words, the pipe `|`, `&&` and `||`, the
redirections `<` and `>`, the append and here-document operators `>>` and
`<<`, parentheses, and the quote characters `'` and `"`.

## Installing

```
pip install .
```

## Running

```
minishell
```

Type a command line at the `❯` prompt, for example:

```
ls -la | (echo "test" | cat -e) && (yes 5 || ls -la)
```

For each line the shell prints:

- one `pipe is being handled` line for every `|` token in it;
- the token list as a coloured chain: each token shown as its numeric type
  and its quoted text, joined by `->`, the end-of-input token shown as `0`,
  followed by `NULL` and the number of tokens;
- `Success!`;
- the line itself, echoed back.

A line holding a character that cannot start a token (a lone `&`) gets a
`minishell: unexpected '&' at position N` message instead of the token
list, and the line is still echoed.

The session ends on `exit`, on any line that is a prefix of `exit`
(`e`, `ex`, `exi`), on an empty line, and at end of input (Ctrl-D). Line
editing is available where Python's `readline` module is.

## Using it as a library

```python
from minishell.lexer import tokenize
from minishell.tokens import TokenType, format_tokens

tokens = tokenize("cat < in.txt >> out.txt")
print([token.value for token in tokens])
# ['cat', '<', 'in.txt', '>>', 'out.txt', None]
print(tokens[1].type is TokenType.L_RED)
# True
print(format_tokens(tokens))
```

- `minishell.lexer.tokenize(line)` returns a list of `Token` objects. Each
  has a `value` (its text, `None` for the end-of-input token), a `type` (a
  `TokenType`), a `category` (`TokenType.WORD`, `TokenType.OP`,
  `TokenType.DELIMITER`, or `TokenType.EOF` for the end-of-input token) and
  an `index`, its position in the list. A non-empty line always ends with a
  `TokenType.EOF` token; an empty line gives an empty list. Anything after a
  NUL character is ignored. A character that cannot start a token raises
  `minishell.lexer.LexError` (a `ValueError`), whose `position` attribute
  gives where it was found.
- `minishell.lexer.is_space(c)` is true for a space and for the characters
  tab through carriage return; `minishell.lexer.check_limit(c)` is true for
  any character that ends a word: blanks and `< > | & ( ) " '`.
- `minishell.tokens.format_tokens(tokens)` renders a token list the way the
  shell prints it; an empty list is rendered as `list is empty` followed by
  `NULL 0`.
- `minishell.shell.process_line(line)` returns the report printed for one
  line; `minishell.shell.repl(lines, out)` runs the whole session over an
  iterable of lines, writing to `out`, and returns the exit status `0`.
  `minishell.shell.main()` is the `minishell` command.

## What it does not do

This is the front end of a shell only. It does not parse the tokens into
commands, does not join quoted text into words, does not expand variables,
and does not run anything: no commands are started, no pipes are connected
and no files are opened for redirection.

## Running the tests

```
pip install ".[test]"
pytest
```