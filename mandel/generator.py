import os
import queue
import logging
from time import monotonic
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from mandel.fractal import compute_line
from mandel.parameters import plane_scale, row_origin

FALLBACK_WORKERS = 4


class GenerationError(RuntimeError):
    """A generation call failed and produced no field."""


class InvalidDimensionsError(GenerationError, ValueError):
    pass


class RowComputationError(GenerationError):
    def __init__(self, row, cause):
        super().__init__(f"Row {row} failed: {cause!r}")
        self.row = row


class InvalidWorkerCountError(GenerationError, ValueError):
    pass


class GenerationCancelled(GenerationError):
    pass


class GenerationTimeout(GenerationError):
    pass


def default_worker_count():
    return os.cpu_count() or FALLBACK_WORKERS


def _validate(img_width, img_height, max_iterations):
    for name, value, minimum in (
        ("img_width", img_width, 1),
        ("img_height", img_height, 1),
        ("max_iterations", max_iterations, 0),
    ):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensionsError(f"{name} must be an integer, got {value!r}")
        if value < minimum:
            raise InvalidDimensionsError(f"{name} must be >= {minimum}, got {value}")


class FieldGenerator:
    """
    Computes escape-time fields one raster row per task on a thread pool.

    Rows come back through a queue tagged with their index and are written
    into a preallocated field by that index, so the result does not depend on
    the order in which workers finish.
    """

    def __init__(self, worker_count=None, executor=None, row_worker=compute_line):
        if worker_count is None:
            worker_count = default_worker_count()
        if worker_count < 1:
            raise InvalidWorkerCountError(f"worker_count must be >= 1, got {worker_count}")
        self.worker_count = worker_count
        self.executor = executor
        self.row_worker = row_worker

    def generate(self, view, img_width, img_height, max_iterations, cancel=None, timeout=None):
        """
        Compute the (img_height, img_width) field of escape counts for view.

        :param cancel: optional threading.Event; once set, remaining rows are
            skipped and GenerationCancelled is raised.
        :param timeout: optional deadline in seconds for the whole call.
        :return: int32 array, row 0 at view.top.
        """
        _validate(img_width, img_height, max_iterations)
        scalex, scaley = plane_scale(view, img_width, img_height)

        logging.info(
            f"Generating {img_width}x{img_height} field with {max_iterations} iterations "
            f"on {self.worker_count} workers..."
        )
        start_time = monotonic()

        results = queue.Queue()
        owns_executor = self.executor is None
        executor = ThreadPoolExecutor(max_workers=self.worker_count) if owns_executor else self.executor
        futures = []
        failed = True
        try:
            for y in range(img_height):
                cx0, cy = row_origin(view, y, scaley)
                try:
                    futures.append(executor.submit(
                        self._run_row, results, cancel, y,
                        img_width, max_iterations, float(cx0), float(cy), float(scalex),
                    ))
                except RuntimeError as exc:
                    raise GenerationError(f"Could not dispatch row {y}") from exc
            field = self._collect(results, img_width, img_height, start_time, timeout)
            failed = False
        finally:
            if failed:
                for future in futures:
                    future.cancel()
            if owns_executor:
                executor.shutdown(wait=not failed, cancel_futures=failed)

        logging.info(f"Field generated in {monotonic() - start_time:.2f} seconds.")
        return field

    def _run_row(self, results, cancel, y, img_width, max_iterations, cx0, cy, step):
        try:
            if cancel is not None and cancel.is_set():
                raise GenerationCancelled(f"Cancelled before row {y}")
            line = self.row_worker(img_width, max_iterations, cx0, cy, step)
        except BaseException as exc:
            results.put((y, None, exc))
        else:
            results.put((y, line, None))

    def _collect(self, results, img_width, img_height, start_time, timeout):
        field = np.zeros((img_height, img_width), dtype=np.int32)
        received = np.zeros(img_height, dtype=bool)
        for _ in range(img_height):
            remaining = None
            if timeout is not None:
                remaining = max(0.0, timeout - (monotonic() - start_time))
            try:
                y, line, error = results.get(timeout=remaining)
            except queue.Empty:
                raise GenerationTimeout(
                    f"Generation exceeded {timeout} seconds with {int(received.sum())}/{img_height} rows done"
                ) from None

            if isinstance(error, GenerationCancelled):
                raise error
            if error is not None:
                raise RowComputationError(y, error) from error
            if not 0 <= y < img_height:
                raise GenerationError(f"Result tagged with unknown row {y}")
            if received[y]:
                raise GenerationError(f"Row {y} delivered twice")
            line = np.asarray(line)
            if line.shape != (img_width,):
                raise GenerationError(f"Row {y} has shape {line.shape}, expected ({img_width},)")
            field[y] = line
            received[y] = True
            logging.debug(f"Row {y} done.")
        return field


def generate(view, img_width, img_height, max_iterations, worker_count=None):
    """Generate a field on a pool that lives only for this call."""
    return FieldGenerator(worker_count=worker_count).generate(view, img_width, img_height, max_iterations)
