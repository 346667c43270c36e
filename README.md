# sigtalk

sigtalk passes text from one process to another using only two POSIX
signals. Each character is sent as eight bits, most significant bit first.
`SIGUSR1` carries a `0` and `SIGUSR2` carries a `1`. The receiving process
rebuilds each byte from the bits it receives and writes the byte to
standard output.

It runs only on POSIX systems, because it needs `SIGUSR1` and `SIGUSR2`.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for signals
until you interrupt it with Ctrl-C:

```
sigtalk-server
```

In another terminal, send a message to that process id:

```
sigtalk-client 12345 "hello there"
```

The server writes `hello there`, one byte at a time as each byte arrives.

The client takes exactly two arguments: the server's pid and the message.
With any other number of arguments it exits with status 1. It also exits
with status 1 and prints an error to standard error in these cases:

- the pid is not a positive number;
- the message contains a character outside 7-bit ASCII;
- the signal cannot be delivered.

The client checks the whole message before it sends anything. It waits
150 microseconds after each signal.

## Limitations

- Only 7-bit ASCII characters can be sent. The first bit of every character is always 0.
- Nothing is sent back to the client. The client cannot tell whether the server received the message.
- The server keeps one bit buffer for all senders. If two clients send at the same time, their bits mix together.

## Library use

The bit protocol can be used on its own:

```python
from sigtalk.protocol import encode_char, encode_message, BitDecoder

bits = encode_char("A")          # (0, 1, 0, 0, 0, 0, 0, 1)
decoder = BitDecoder()
for bit in encode_message("hi"):
    code = decoder.feed(bit)     # None, or a character code after every eighth bit
```

`signal_for_bit(bit)` and `bit_for_signal(signum)` map between a bit and
the signal that carries it.

`sigtalk.client.send_message(pid, message, delay, kill)` sends a message.
`delay` is the pause after each signal, in seconds. `kill` is the function
that delivers each signal and defaults to `os.kill`.

`sigtalk.server.Server(output)` writes every decoded byte to a binary
stream. It uses standard output when `output` is `None`. `Server.handle`
is the signal handler. `Server.install()` registers it for both signals.

The package also contains small helper modules:

- `sigtalk.printf`: `format` and `printf`. They support `%c %s %d %i %u %x %X %p %%`. Integer conversions wrap to 32 bits. `printf` returns the number of characters written.
- `sigtalk.linereader.LineReader`: reads lines, with the newline included, from a text or binary stream through a fixed-size buffer (9 by default). It can be iterated.
- `sigtalk.numbers`: `atoi` and `itoa`, which convert between decimal text and 32-bit integers.
- `sigtalk.strings`: `split`, `strtrim`, `substr`, `strnstr`, `strncmp`, `memcmp`, `strchr`, `strrchr`, `map_indexed`. Searches return an index, or `None` when nothing is found.
- `sigtalk.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`, for ASCII characters or character codes.

## Tests

```
pip install .[test]
pytest
```