# cbos

A small networking service with two parts:

* a threaded TCP server that answers framed JSON API requests, and
* an AMQP publisher that sends text messages to a RabbitMQ exchange.

## Installation

```
pip install .
```

## Running the service

```
cbos
```

The command does two things:

* It starts the TCP server. By default the server listens on port 4444 on all
  interfaces, with a backlog of 50. Each client is served on its own thread.
* It starts a background thread that connects to RabbitMQ on `localhost:5672`
  as the broker's built-in `guest` user. After a delay of 5 seconds it
  publishes the text `Hello, FCC from CBOS!` to the `BOSFCC` exchange with
  routing key `BOSDATA`. If the broker cannot be reached, the error is logged
  and the TCP server keeps running.

Log messages go to standard error. Stop the service with Ctrl+C. If the server
cannot listen on its port, the command exits with status 1.

### Options

| Option          | Default     | Meaning                                                   |
|-----------------|-------------|-----------------------------------------------------------|
| `--host`        | all         | address to listen on                                      |
| `--port`        | `4444`      | TCP port to listen on                                     |
| `--backlog`     | `50`        | listen backlog                                            |
| `--amqp-host`   | `localhost` | RabbitMQ host                                             |
| `--amqp-port`   | `5672`      | RabbitMQ port                                             |
| `--exchange`    | `BOSFCC`    | exchange the greeting is published to                     |
| `--routing-key` | `BOSDATA`   | routing key of the greeting                               |
| `--delay`       | `5.0`       | seconds to wait after connecting before sending the greeting |

## Request format

A client sends a JSON object framed by `<` and `>`:

```
<{"Api_Name": "GetStatus", "Api_Version": 2}>
```

The server answers with a compact JSON object whose keys are sorted:

```
{"Api_Name":"GetStatus","Api_Version":2,"Data":"none","Is_Valid":true}
```

Only the text from the first `<` to the first `>` is read, and anything after a
NUL byte is ignored. A numeric `Api_Version` with a fractional part is
truncated to an integer.

If the frame markers are missing or out of order, the JSON is malformed or is
not an object, `Api_Name` is not a string, or `Api_Version` is not a number,
the answer is:

```
{"Api_Name":"Unknown","Api_Version":0,"Data":"none","Is_Valid":false}
```

Each chunk the server receives is answered on its own. A request split across
several reads is not put back together.

## Library use

```python
import threading

from cbos.parser import generate_response, parse_frame
from cbos.publisher import AmqpPublisher, PublisherError
from cbos.server import TcpServer

reply = parse_frame('<{"Api_Name": "Ping", "Api_Version": 1}>')
# '{"Api_Name":"Ping","Api_Version":1,"Data":"none","Is_Valid":true}'

try:
    with AmqpPublisher("BOSFCC", "BOSDATA") as publisher:
        publisher.connect("localhost", 5672)
        publisher.publish("Hello")
except PublisherError as exc:
    print(exc)

server = TcpServer("127.0.0.1", 0, 50)
host, port = server.bind()          # port 0 picks a free port
threading.Thread(target=server.serve_forever, daemon=True).start()
# ...
server.close()
```

* `parse_frame(data)` accepts `str` or bytes and returns the JSON reply.
* `generate_response(api_name, version, is_valid)` builds a reply directly.
* `AmqpPublisher` publishes persistent `text/plain` messages on channel 1.
  `connect` and `publish` raise `PublisherError` on failure, and `publish`
  raises it too if the publisher is not connected. `close` is called when the
  `with` block ends.
* `TcpServer.serve_forever()` binds first if `bind()` has not been called. It
  accepts clients until `close()` is called. If accepting fails, it closes the
  listening socket and binds again.
* `cbos.server.handle_client(connection)` serves one connected socket until the
  peer closes it.
* `cbos.cli.publish_greeting(...)` sends the greeting once and then closes the
  connection.

## What it does not do

* The `Data` field of every reply is the fixed string `"none"`. The service
  checks and echoes requests, but it does not carry out any API.
* Nothing received over TCP is forwarded to RabbitMQ. The only message the
  command publishes is the greeting.
* The broker user is always `guest` on virtual host `/`. No option changes it.

## Tests

```
pip install .[test]
pytest
```