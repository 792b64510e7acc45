"""Command-line application: run the edge filter or benchmark it."""

import argparse
import math
import os
import sys
import time

import numpy as np
from PIL import Image

from .sobel import sobel_custom, sobel_parallel, sobel_reference

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _average(total, count):
    return total / count if count > 0 else math.nan


def _ratio(numerator, denominator):
    if denominator == 0:
        return math.nan if numerator == 0 or math.isnan(numerator) else math.inf
    return numerator / denominator


class SobelFilterApp:
    """Loads an image, runs one of the Sobel pipelines, and saves or times it."""

    def __init__(self, input_path, output_path, mode="o", iters=10):
        self.input_path = str(input_path)
        self.output_path = str(output_path)
        self.mode = mode
        self.iters = iters

    def run(self):
        """Dispatch on mode: 'r' regular, 'b' benchmark, 'o' parallel."""
        handler = {
            "r": self.regular_run,
            "b": self.bench_run,
            "o": self.parallel_run,
        }.get(self.mode)
        return handler() if handler else EXIT_FAILURE

    def _load_image(self):
        """Read the input as a BGR uint8 array, or None if it cannot be read."""
        try:
            with Image.open(self.input_path) as img:
                rgb = np.asarray(img.convert("RGB"))
        except OSError:
            return None
        return np.ascontiguousarray(rgb[..., ::-1])

    def _save_image(self, img):
        pixels = img[..., ::-1] if img.ndim == 3 else img
        Image.fromarray(np.ascontiguousarray(pixels)).save(self.output_path)

    def _filter_and_save(self, pipeline):
        image = self._load_image()
        if image is None:
            print(f"Error opening image: {self.input_path}")
            return EXIT_FAILURE
        self._save_image(pipeline(image))
        return EXIT_SUCCESS

    def regular_run(self):
        """Filter the input with the serial pipeline and save the result."""
        return self._filter_and_save(sobel_custom)

    def parallel_run(self):
        """Filter the input with the threaded pipeline and save the result."""
        return self._filter_and_save(sobel_parallel)

    def _average_ms(self, pipeline, image):
        total = 0.0
        for _ in range(self.iters):
            current = image.copy()
            started = time.perf_counter()
            pipeline(current)
            total += (time.perf_counter() - started) * 1000.0
        return _average(total, self.iters)

    def bench_run(self):
        """Time the three pipelines and print averages and speedups."""
        image = self._load_image()
        if image is None:
            print(f"Error opening image: {self.input_path}", file=sys.stderr)
            return EXIT_FAILURE

        serial_ms = self._average_ms(sobel_custom, image)
        print(f"(Implemented Sobel) Average time over {self.iters} runs: {serial_ms:.2f} ms")

        reference_ms = self._average_ms(sobel_reference, image)
        print(f"(Reference Sobel) Average time over {self.iters} runs: {reference_ms:.2f} ms")

        threads = os.cpu_count() or 1
        parallel_ms = self._average_ms(sobel_parallel, image)
        print(
            f"(Parallel implemented Sobel with {threads} thread(s)) "
            f"Average time over {self.iters} runs: {parallel_ms:.2f} ms"
        )

        print("\n--- Speedup Analysis ---")
        print(
            "Speedup (Implemented Sobel / Parallel Implemented Sobel): "
            f"{_ratio(serial_ms, parallel_ms):.2f}x"
        )
        print(
            "Speedup (Reference Sobel / Parallel Implemented Sobel): "
            f"{_ratio(reference_ms, parallel_ms):.2f}x"
        )
        print("------------------------\n")
        return EXIT_SUCCESS


def main(argv=None):
    """Parse the command line and run the application; returns the exit status."""
    parser = argparse.ArgumentParser(prog="sobelfilter", description="Sobel edge detection.")
    parser.add_argument("input", nargs="?", default="lena.jpg", help="input image")
    parser.add_argument("output", nargs="?", default="out.jpg", help="result image")
    parser.add_argument(
        "mode",
        nargs="?",
        default="o",
        help="'r' - regular output; 'b' - benchmark; 'o' - parallel output",
    )
    parser.add_argument(
        "iters",
        nargs="?",
        type=int,
        default=10,
        help="iterations in benchmark mode, ignored otherwise",
    )
    args = parser.parse_args(argv)
    return SobelFilterApp(args.input, args.output, args.mode, args.iters).run()


if __name__ == "__main__":
    raise SystemExit(main())