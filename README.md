# sobelfilter

Edge detection with the Sobel operator. The pipeline is written out by hand:
a 3×3 binomial blur applied per channel, a weighted conversion to grey,
horizontal and vertical Sobel convolutions, absolute values saturated to
8 bits, and an equal-weight blend of the two gradients. The same pipeline can
also be run with its work split across threads. A reference pipeline built on
SciPy is included for comparison.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
sobelfilter [INPUT] [OUTPUT] [MODE] [ITERS]
```

All arguments are positional and optional:

| Argument | Default    | Meaning |
|----------|------------|---------|
| INPUT    | `lena.jpg` | image to read (converted to colour on loading) |
| OUTPUT   | `out.jpg`  | where the edge image is written; the format follows the extension |
| MODE     | `o`        | `r` — serial run, `o` — threaded run, `b` — benchmark |
| ITERS    | `10`       | iterations per pipeline in benchmark mode; ignored otherwise |

Examples:

```
sobelfilter photo.png edges.png r
sobelfilter photo.png edges.png o
sobelfilter photo.png unused.png b 20
```

Benchmark mode writes no image. It prints the average time in milliseconds of
the serial pipeline, the reference pipeline and the threaded pipeline (with
the number of CPUs reported as the thread count), followed by the speedup of
the threaded pipeline over the other two.

The exit status is 0 on success and 1 when the input image cannot be read
(an `Error opening image: ...` message is printed) or when the mode is not one
of `r`, `b` or `o` (nothing is printed).

## Library use

Images are NumPy arrays in BGR channel order, `uint8`, shaped
`(rows, cols, 3)`.

```python
import numpy as np
from PIL import Image

from sobelfilter.sobel import sobel_custom, sobel_parallel, sobel_reference

rgb = np.asarray(Image.open("photo.png").convert("RGB"))
bgr = rgb[:, :, ::-1]

edges = sobel_custom(bgr)                 # 2-D uint8 edge map
edges_mt = sobel_parallel(bgr, workers=4)
edges_ref = sobel_reference(bgr, ksize=3, scale=1, delta=0)

Image.fromarray(edges).save("edges.png")
```

`sobel_reference` blurs with a 3×3 Gaussian, converts to grey, takes Sobel
derivatives with reflected borders (`ksize` may be 1, 3, 5, … 31; anything
else raises `ValueError`), scales them by `scale`, adds `delta`, saturates to
`int16`, and averages their absolute values.

Wherever a `workers` argument is taken, `None` means one thread per CPU, and a
value below 1 raises `ValueError`.

The building blocks are available on their own:

- `sobelfilter.gaussian_blur` — `gaussian_blur(src)` and
  `gaussian_blur_parallel(src, workers=None)`. They accept 2-D or
  multi-channel `uint8` images and use the kernel (0.25, 0.5, 0.25). Both
  passes read the original channel: interior pixels get the vertical blur, the
  first and last rows keep the horizontal blur, and the four corners are left
  unchanged.
- `sobelfilter.utils` — `image_to_grey(src)` (0.299 R + 0.587 G + 0.114 B on
  a BGR image), `combine_weighted(src_x, weight1, src_y, weight2)` (weights
  clamped to [0, 1], result saturated to `uint8`), `convert_s16_to_8u(src)`
  and `convert_s16_to_8u_parallel(src, workers=None)` (absolute value of an
  `int16` image, saturated to `uint8`).
- `sobelfilter.convolution` — `Convolution(kernel)` with `apply(src)` and
  `apply_parallel(src, workers=None)`, plus the ready-made
  `HorizontalSobelConvolution()` and `VerticalSobelConvolution()`.
  Convolution flips the kernel, takes a 2-D `uint8` image, treats pixels
  outside the image as zero, and returns saturated `int16` results.

Inputs of the wrong type or shape raise `ValueError`.

The application can also be driven from Python:

```python
from sobelfilter.app import SobelFilterApp

status = SobelFilterApp("photo.png", "edges.png", "r", 10).run()
```

`SobelFilterApp` also has `regular_run()`, `parallel_run()` and `bench_run()`,
and `sobelfilter.app.main(argv=None)` parses a command line as above.

## What it does not do

There is no window or viewer: results are only written to files, and the
kernel sizes of the hand-written blur and Sobel stages are fixed at 3×3.