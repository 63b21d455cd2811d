# zxtestkit

Building blocks for writing regression tests against a ZX Spectrum emulator.
Pure standard library; no third-party dependencies.

## What is inside

- `zxtestkit.palette`: `ORIGINAL`, the 16-colour Spectrum palette as RGBA tuples
  (eight normal colours, then their bright variants), and `png_palette()`, which
  returns the colours as packed RGB triples for a PNG `PLTE` chunk.
- `zxtestkit.stopwatch`: `InstantStopwatch`, whose `measure()` returns the time
  elapsed since creation as a `timedelta`, on a monotonic clock.
- `zxtestkit.assets`: readable and seekable assets.
  - `BufferCursor`: in-memory bytes with a read position; `into_bytes()` returns
    the whole buffer.
  - `FileAsset`: wraps an open binary file and adds `write()`.
  - `GzipAsset`: decompresses a gzip stream into memory on creation;
    `into_bytes()` returns the decompressed content.
  - `DynamicAsset` and `DynamicDataRecorder`: wrap any readable/seekable asset
    or any writer behind one interface.
  - `SeekFrom` (`START`, `CURRENT`, `END`) gives the seek origin; failures
    raise `AssetError`, a subclass of `OSError`.
- `zxtestkit.framebuffer`: `FrameContent`, a frame storing one 4-bit palette
  index per pixel (colour 0–7, plus 8 when bright). `set_color()` writes a pixel,
  `pixel()` reads it back, `to_png()` encodes the frame as a 4-bit indexed PNG
  with the standard palette (the width must be even).
- `zxtestkit.debug`: `DebugPort`, a byte pipe between the host and the emulated
  program on port `0xCCCC` (`DEBUG_PORT_ADDRESS`); reading an empty port gives 0.
  `BreakpointDebugger` holds program-counter breakpoints and records the last
  one hit in `last_hit`.
- `zxtestkit.fixtures`: `fingerprint()` (base64 of SHA-256), file name helpers
  (`screen_filename`, `border_filename`, `sound_filename`, `text_filename`),
  `normalize_sample()` to turn a float sample in [-1, 1] into a saturated 16-bit
  integer, `wav_bytes()` to encode interleaved 16-bit samples as PCM WAV
  (44100 Hz stereo by default), and `save_actual_data()` to write output files.
- `zxtestkit.build_assets`: builds the test assets inside a Docker image
  (`DockerImage`, `DockerContainer`, `DockerMountPoint`); external command
  failures raise `CommandError`.

## Example

```python
from zxtestkit.framebuffer import FrameContent
from zxtestkit.fixtures import fingerprint, screen_filename

frame = FrameContent(256, 192)
frame.set_color(0, 0, 2, 1)
assert frame.pixel(0, 0) == 10
print(screen_filename("result"), fingerprint(frame.to_png()))
```

```python
from zxtestkit.debug import DebugPort

port = DebugPort()
port.put_text("hi")
assert port.read(0xCCCC) == ord("h")
port.write(0xCCCC, ord("k"))
assert port.take_text() == "k"
```

## Building test assets

With Docker available, run:

```
zxtestkit-build-assets
```

It builds the compiler image if Docker does not have it yet, then runs
`/src/make.sh` in a throw-away container with the asset directory mounted at
`/src/`. The directory defaults to `test_data` under the current working
directory; choose another with `--assets-dir PATH`. The command exits with
status 1 and prints an error if a Docker command fails.

## What this package does not do

It contains no emulator and no test driver that runs one: it provides the
host-side pieces (frame buffer, debug port, breakpoints, assets, fingerprints,
WAV encoding) that such a driver plugs into an emulator.