# peernet

A small TCP toolkit. It contains:

- the `peernet` command, which runs a message server or an interactive client;
- the `Client`, `Server` and `PeerToPeer` node classes;
- the simple data structures they are built on: `LinkedList`, `Queue`,
  `BinarySearchTree` and `Dictionary`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Start a server that listens on port 8080 on all interfaces:

```
peernet server
```

On each connection it accepts, the server reads one message of up to 1024
bytes, prints it as `[SERVER] Message received: ...`, replies with
`Server received the message.` and then closes the connection.

Connect a client to it:

```
peernet client 127.0.0.1
```

The client prompts with `> Enter message: `, sends each line it reads and
prints the reply as `[CLIENT] Reply from server: ...`. It stops when you type
`exit` or standard input ends. The whole session uses one connection. The
server closes each connection after one reply, so only the first message of
a session gets the server's answer.

Running `peernet` with no arguments prints the usage and exits with status 1.
Any other arguments are reported as `Invalid parameters.` and also give
status 1. A socket error is printed and gives status 1. Ctrl-C ends the
command with status 0.

## Data structures

```python
from peernet.linked_list import LinkedList
from peernet.fifo import Queue
from peernet.bst import BinarySearchTree, str_compare
from peernet.dictionary import Dictionary, compare_string_keys

items = LinkedList()
items.insert(0, "b")
items.insert(0, "a")
items.push_back("c")
print(list(items))           # ['a', 'b', 'c']

queue = Queue()
queue.push("first")
queue.push("second")
print(queue.peek())          # first
print(queue.pop())           # first

tree = BinarySearchTree(str_compare)
tree.insert("apple")
print(tree.search("apple"))  # apple
print(tree.search("pear"))   # None

routes = Dictionary(compare_string_keys)
routes.insert("/known_hosts", "handler")
print(routes.search("/known_hosts"))  # handler
```

Each comparison function returns `1`, `-1` or `0`, like the two supplied
ones, `str_compare` and `compare_string_keys`.

- `LinkedList.insert` and `LinkedList.remove` raise `IndexError` for a
  position out of range. `retrieve` returns `None` for such a position.
  `sort(compare)` sorts in place. `search(query, compare)` is a binary search
  that expects a list already sorted by `compare`, and returns `True` or
  `False`.
- `Queue.peek` returns `None` when the queue is empty. `Queue.pop` raises
  `IndexError` when it is empty.
- `BinarySearchTree` stores values that compare equal only once.
- `Dictionary` keeps the first value inserted under a key. Its `keys` list
  records every inserted key in insertion order, repeats included.

## Nodes

- `peernet.client.Client(domain, service, protocol, port, interface)` opens a
  socket. `request(server_ip, request)` connects to `server_ip` on the
  client's port, sends the request (bytes or str) and returns up to 30000
  bytes of reply. If `server_ip` cannot be parsed, the client uses
  `interface`, given as an integer address, instead. Close the client with
  `close()` or use it as a context manager.
- `peernet.server.Server(domain, service, protocol, interface, port, backlog)`
  binds to `interface` (an integer address) and `port`, and starts listening
  as soon as it is created. It raises `OSError` if either step fails.
  `register_routes(route_function, path)` stores a `ServerRoute` for the path
  in the server's `router` dictionary. Close the server with `close()` or use
  it as a context manager.
- `peernet.peer_to_peer.PeerToPeer(domain, service, protocol, port, interface,
  server_function, client_function)` creates a listening `Server` with a
  backlog of 20 and starts out knowing the host `127.0.0.1`. It registers its
  `known_hosts` method under the path `"/known_hosts\n"`. `known_hosts()`
  prints `known hosts requested` and returns every known host followed by a
  comma, for example `"127.0.0.1,"`. `user_portal()` starts
  `server_function(peer)` in a daemon thread, runs `client_function(peer)`
  and returns the thread.

## What it does not do

The `Server` class only binds, listens and records routes. It does not
accept connections and does not dispatch requests to the registered routes.
A `PeerToPeer` node therefore serves nothing by itself: the
`server_function` and `client_function` you pass in have to do that work.
There is no discovery of peers beyond the one built-in host.