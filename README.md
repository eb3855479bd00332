# chromatools

Small, dependency-free building blocks used when computing and storing
audio fingerprints.

## Installation

```
pip install chromatools
```

To run the test suite, install the test extra and run pytest:

```
pip install "chromatools[test]"
pytest
```

## What is inside

- `chromatools.base64url`: unpadded URL-safe base64 (alphabet `A-Z a-z 0-9 - _`),
  as used for compact fingerprint strings. `encode` takes bytes and returns
  text; `decode` takes text or bytes and returns bytes. Decoding is lenient:
  characters outside the alphabet count as zero and a lone trailing character
  is ignored. `encoded_size` and `decoded_size` give the output lengths.
- `chromatools.bitpack`: pack small unsigned integers into 3-bit or 5-bit
  fields, least significant bit first, and unpack them again. `pack_int3`,
  `unpack_int3`, `pack_int5`, `unpack_int5` and the matching
  `packed_int3_size`, `unpacked_int3_size`, `packed_int5_size`,
  `unpacked_int5_size`. Bits above the field width are dropped; unpacking
  returns every complete value the bytes hold.
- `chromatools.gaussian`: `box_filter(values, width)`, a moving average with
  mirrored edges, and `gaussian_filter(values, sigma, n)`, which approximates
  a Gaussian blur with `n` box passes (raises `ValueError` if `n < 1`). Both
  walk the data with `ReflectIterator`, a cursor that bounces off both ends.
- `chromatools.gradient`: `gradient(values)`, central differences inside,
  one-sided differences at the ends, `[0.0]` for a single value.
- `chromatools.integral_image`: `RollingIntegralImage(max_rows)`, a
  summed-area table that keeps only the most recent rows. Add rows with
  `add_row`, get rectangle sums over rows `[r1, r2)` and columns `[c1, c2)`
  with `area(r1, c1, r2, c2)`, clear it with `reset`. `from_data` builds one
  from flat row-major data; `num_rows` and `num_columns` report its size.
  Asking for rows no longer held, or rows of the wrong length, raises
  `ValueError`.
- `chromatools.image`: `Image(columns, rows=0)`, a growable row-major 2-D
  array of floats. `add_row` pads short rows with zeros, `row(i)` and
  `image[i]` return a row that can be modified in place, `from_values` builds
  one from flat data; it also supports `len()` and iteration.
- `chromatools.quantizer`: `Quantizer(t0, t1, t2)`, a dataclass whose
  `quantize` maps a value to 0–3 using the thresholds `t0 <= t1 <= t2`
  (other orders raise `ValueError`).

## Examples

```python
from chromatools import base64url, bitpack
from chromatools.integral_image import RollingIntegralImage
from chromatools.quantizer import Quantizer

assert base64url.encode(b"xxx") == "eHh4"
assert base64url.decode("eHg") == b"xx"

packed = bitpack.pack_int3([1, 2, 3, 4, 5, 6, 7, 0])
assert bitpack.unpack_int3(packed) == [1, 2, 3, 4, 5, 6, 7, 0]

image = RollingIntegralImage(4)
image.add_row([1, 2, 3])
image.add_row([4, 5, 6])
assert image.area(0, 0, 2, 3) == 21

quantizer = Quantizer(0.0, 1.0, 2.0)
assert quantizer.quantize(1.5) == 2
```

## What this package does not do

These are only the pieces. The package does not read or decode audio files,
resample audio, compute chroma features or fingerprints, compress or
decompress fingerprints, or compare them, and it has no command-line tool.