# netlab

Small, interactive networking exercises run from the shell:

- a distance vector routing table calculator
- a leaky bucket traffic shaper
- a single-file transfer over TCP
- a stop-and-wait demonstration with simulated loss
- a line-by-line TCP chat
- a single request/reply exchange over UDP

The socket programs default to `127.0.0.1`, port `2000`; every one of them
takes `--host` and `--port` to change that. Start the server side first.

## Install

```
pip install .
```

With the test extra:

```
pip install ".[test]"
pytest
```

## Distance vector routing

```
netlab-dvr
```

Enter the number of routers, then each entry of the cost matrix. Costs are
relaxed repeatedly until no route improves, and a routing table is printed
for every router: next hop and distance to each destination, numbered from 1.
There is no special "unreachable" value; use a large cost for missing links.

From Python:

- `netlab.dvr.distance_vector(costs)` takes a square matrix of non-negative
  integers (at most 20 routers) and returns, per router, a list of `Route`
  entries with a 0-based `via` and a `distance`. The diagonal is always
  treated as 0. A non-square matrix, a negative cost or more than 20 routers
  raises `ValueError`.
- `netlab.dvr.format_tables(tables)` renders those tables as text.

## Leaky bucket

```
netlab-leaky-bucket
```

Enter the bucket size, the outflow rate and the number of packets, then each
packet size. For every packet it reports either the fill level after adding
it or how much was dropped, followed by the level after the leak.

From Python, `LeakyBucket(size, out_rate).offer(packet)` returns a `Step`
with `packet`, `accepted`, `dropped`, `filled` (level before leaking) and
`level` (level after leaking); `Step.describe(size)` gives the status line.

## File transfer

```
netlab-ftp-server [--host HOST] [--port PORT] [--delay SECONDS]
netlab-ftp-client [--host HOST] [--port PORT]
```

The client asks for the name of the file on the server and a local name to
save it under, then prints each chunk as it arrives. The server sends the
file line by line in fixed 100-byte records, pausing `--delay` seconds
(default 1) after each, and ends with a completion marker. If the server
cannot open the file the client prints "File not available"; the local file
has already been created, empty, by then.

From Python, `netlab.ftp.serve_file(conn, chunk_delay)` answers one request
on a connected socket, and `netlab.ftp.receive_file(conn, name, out)` writes
the file to a binary stream and returns the byte count, raising
`FileNotAvailable` when the server reports an error.

## Stop-and-wait

```
netlab-snw-receiver [--host HOST] [--port PORT] [--frames N] [--delay SECONDS]
netlab-snw-sender   [--host HOST] [--port PORT] [--frames N] [--delay SECONDS]
```

Five frames by default. For odd frames the sender reports a lost packet and
the receiver a lost acknowledgement; each then counts a simulated timeout,
sleeps `--delay` seconds (default 3) and retransmits.

From Python: `send_frames(conn, count, timeout_delay, out)` and
`receive_frames(conn, count, timeout_delay, out)` in `netlab.stopwait`.

## TCP chat

```
netlab-tcp-server [--host HOST] [--port PORT]
netlab-tcp-client [--host HOST] [--port PORT]
```

Client and server take turns: the client sends a line, the server shows it and
answers with a line. The server stops after answering a client message of
`exit`; the client stops when the server's answer is `exit`. To end both
cleanly, the client types `exit` and the server answers `exit`. Messages must
be shorter than 2000 bytes.

From Python: `client_session(conn, read_line, out)` and
`server_session(conn, read_line, out)` in `netlab.tcpchat`.

## UDP exchange

```
netlab-udp-server [--host HOST] [--port PORT]
netlab-udp-client [--host HOST] [--port PORT]
```

The client sends one message; the server shows it with the sender's address,
replies with one typed line and exits.

From Python: `request(sock, message, address)` and
`serve_once(sock, read_line, out)` in `netlab.udpchat`.

## What this package does not do

Every server handles a single client (or a single datagram) and then exits.
The file transfer fetches one named file only: there are no directory
listings, uploads or authentication, and it is not the standard FTP protocol.
Nothing is encrypted.