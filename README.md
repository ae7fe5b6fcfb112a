# fsdrkit

Building blocks for software-defined radio work in plain Python, with no
third-party dependencies:

- **SigMF metadata** (`fsdrkit.sigmf`): read, build and write `.sigmf-meta`
  descriptions, name sample formats, and compute or verify the SHA-512 hash
  of a recording's `.sigmf-data` file.
- **Automatic gain control** (`fsdrkit.agc`): a sample-by-sample AGC with
  squelch, gain locking and auto-locking once the reference power is reached.
- **Channel blocks** (`fsdrkit.channels`, `fsdrkit.async_channels`): move
  chunks of samples between your code and a processing step through a
  `queue.Queue` or an `asyncio.Queue`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## SigMF metadata

### Dataset formats

`fsdrkit.sigmf.dataset_format.DatasetFormat` is an enum of the 28 SigMF
datatypes (`rf32_le`, `cu8`, `ci16_be`, ...). Each member answers `bits()`,
`size()` (bytes), `is_real()`, `is_complex()`, `is_signed()`,
`is_unsigned()`, `is_little_endian()`, `is_big_endian()`, `is_float()`,
`is_integer()` and `is_byte()`. `DatasetFormat.parse(text)` accepts a label
in any case and raises `UnknownDatasetFormat` for anything else;
`str(member)` gives the label back. `DatasetFormat.all()` lists every format.

`DatasetFormatBuilder` picks a format from a `SampleType` (`U8`, `I8`, `U16`,
`I16`, `U32`, `I32`, `F32`, `F64`), complexity and byte order. Byte order is
little endian unless `big_endian()` is called; it is ignored for 8-bit types.

```python
from fsdrkit.sigmf.dataset_format import DatasetFormat, DatasetFormatBuilder, SampleType

print(DatasetFormatBuilder.complex(SampleType.U32).little_endian().build())  # cu32_le
print(DatasetFormatBuilder.real(SampleType.F32).big_endian().build())        # rf32_be
print(DatasetFormat.parse("RF32_BE").bits())                                  # 32
```

### Descriptions

`fsdrkit.sigmf.metadata` holds the records of a description: `Global`,
`Capture`, `Annotation`, `Extension` and `AntennaExtension` (the
`antenna:model` and `antenna:type` keys of the global object). Each converts
with `to_dict()` / `from_dict()`; keys that are not known fields are kept in
`extra` and written back out unchanged.

`fsdrkit.sigmf.description` holds `Description`, `Collection`, `Recording`
and their builders.

```python
from fsdrkit.sigmf.dataset_format import DatasetFormatBuilder, SampleType
from fsdrkit.sigmf.description import Description, DescriptionBuilder

datatype = DatasetFormatBuilder.complex(SampleType.U32).build()
desc = (
    DescriptionBuilder.from_datatype(datatype)
    .sample_rate(2_000_000.0)
    .extension("extension-01", "0.0.5", True)
    .build()
)
print(desc.to_json())
# {"global":{"core:datatype":"cu32_le","core:version":"1.0.0","core:sample_rate":2000000.0,
#  "core:extensions":[{"name":"extension-01","version":"0.0.5","optional":true}]},
#  "captures":[],"annotations":[]}

desc.create("recording.sigmf-meta", pretty=True)
loaded = Description.open("recording.sigmf-meta")
print(loaded.require_global().sample_rate)  # 2000000.0
```

`Description` also reads and writes through `from_json` / `to_json`,
`read(fp)` / `write(fp, pretty)`. `DescriptionBuilder` offers
`from_datatype`, `from_global`, `collection()`, `open(path)`,
`sample_rate`, `extension`, `captures`, `add_annotation` and `add_stream`
(collections only); `build()` returns an independent copy.

Errors all derive from `fsdrkit.sigmf.errors.SigMFError`:

- `BadSampleRate` for a sample rate that is NaN, negative or above 1e251;
- `MissingMandatoryField` when a `require_*` accessor (`require_global`,
  `require_captures`, `require_annotations`, `require_version`,
  `require_datatype`, `require_model`, `require_hash`) finds the field absent;
- `UnknownDatasetFormat` for an unrecognised datatype label;
- `SigMFJsonError` for malformed JSON or values of the wrong type.

### Recordings

A recording is addressed by a base name; its files are that name with the
suffix replaced by `.sigmf-data` and `.sigmf-meta`.

```python
from fsdrkit.sigmf.description import RecordingBuilder

recording = RecordingBuilder("capture").compute_sha512().build()
print(recording.require_hash())          # hex SHA-512 of capture.sigmf-data
desc = recording.load_description()      # parsed capture.sigmf-meta
```

`RecordingBuilder.load_description()` returns a new builder carrying the
`core:sha512` stored in the metadata (if any) together with the description.

## Command-line tools

Create a collection file listing several recordings, each with the SHA-512
of its data file:

```
sigmf-col create --output index.sigmf-meta capture1 capture2
```

Check the hash stored in each recording's metadata against its data file
("Hash match" or both hashes and "Hash doesn't match"), or store the
computed hash in the metadata when it is missing or different:

```
sigmf-hash check capture1 capture2
sigmf-hash update capture1
```

Errors for a file are printed to standard error and the command exits with
status 1; `check` reports an error for metadata without a `core:sha512`.
The same work is available from Python as
`fsdrkit.sigmf.cli_collection.create_collection(files, output)`,
`fsdrkit.sigmf.cli_hash.check_sigmf(basename)` and
`fsdrkit.sigmf.cli_hash.update_sigmf(basename)`.

## Automatic gain control

```python
from fsdrkit.agc import AgcBuilder

agc = AgcBuilder().adjustment_rate(0.1).reference_power(1.0).build()
leveled = agc.process([0.2, 0.3, -0.25, 0.4])
```

Builder defaults: squelch 0.0, max_gain 65536.0, initial gain 1.0,
reference_power 1.0, adjustment_rate 0.0001, gain_lock and auto_lock off.
A negative `squelch` or `max_gain` raises `ValueError`. `max_gain` is
stored and can be changed, but it does not cap the gain.

`process(samples)` returns a list: samples whose power is at or below the
squelch become 0.0, the others go through `scale(sample)`, which applies the
current gain and then adapts it toward the reference power unless the gain
is locked. With `auto_lock`, the gain locks as soon as the output power
crosses the reference power.

Parameters can be changed while running with
`Agc.handle_message(port, value)`, using the ports `auto_lock`, `gain_lock`
(booleans) and `max_gain`, `adjustment_rate`, `reference_power` (numbers).
It returns `MessageResult.OK`, or `MessageResult.INVALID_VALUE` for a value
of the wrong kind; an unknown port raises `KeyError`.

## Channel sources and sinks

```python
import queue
from fsdrkit.channels import ChannelSink, ChannelSource, Closed

q = queue.Queue()
sink = ChannelSink(q)
sink.work([0.0, 1.0, 2.0])   # returns 3; the batch goes on the queue as one list
q.put(Closed())

source = ChannelSource(q)
print(source.drain())         # [0.0, 1.0, 2.0]
```

- `ChannelSink.work(samples, finished=False)` puts the batch on the queue
  without blocking; a batch that does not fit into a full queue is dropped.
- `ChannelSource.work(capacity)` returns at most `capacity` samples without
  blocking (an empty list when nothing is queued) and raises `ChannelClosed`
  once a `Closed` marker is reached with nothing pending.
- `ChannelSource.drain(limit=None)` waits for chunks and collects samples
  until `limit` is reached or the queue is closed.

`fsdrkit.async_channels.AsyncChannelSink` and `AsyncChannelSource` do the
same over an `asyncio.Queue`, with `work` and `drain` as coroutines; the
source's `work` waits for a chunk when none is pending.

## What this package does not do

- It does not run a processing graph or scheduler; blocks are driven by
  calling their methods directly.
- It does not decode or encode sample data: `.sigmf-data` files are only
  hashed, never read as samples or written.
- `sigmf-col` only creates collections; it cannot update an existing one.
- The AGC works on real-valued samples only.