import sys
import time
import os
import logging
from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from alphabet import alphabet_of_size
from basin_codec import BasinDecoder, BasinEncoder
from utils import theoretical_symbols_per_byte

logging.getLogger("basin_codec").setLevel(logging.WARNING)

DEFAULT_BASES = (2, 10, 16, 32, 64, 85, 94, 128, 256)


def random_payload(num_bytes: int, seed: int = 0) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=num_bytes, dtype=np.uint8).tobytes()


def run_single_benchmark(base: int, payload: bytes, csv_path: Optional[str] = None) -> Dict:
    alphabet = alphabet_of_size(base)
    encoder = BasinEncoder(alphabet=alphabet)
    decoder = BasinDecoder(alphabet=alphabet)

    tik = time.perf_counter()
    encoded = encoder.encode(payload)
    enc_time = time.perf_counter() - tik

    tik = time.perf_counter()
    decoded = decoder.decode_bytes(encoded)
    dec_time = time.perf_counter() - tik

    if decoded != payload:
        raise RuntimeError(f"round trip failed for base {base}")

    num_bytes = len(payload)
    ratio = len(encoded) / num_bytes if num_bytes else float("nan")
    optimum = theoretical_symbols_per_byte(base)

    new_row = {
        "Base": base, "Bytes": num_bytes, "Symbols": len(encoded),
        "EncodeTime": enc_time, "DecodeTime": dec_time,
        "Ratio": ratio, "Optimum": optimum, "Overhead": ratio / optimum - 1,
    }

    if csv_path is not None:
        header = not os.path.exists(csv_path)
        pd.DataFrame([new_row]).to_csv(csv_path, mode='a', header=header, index=False)
    return new_row


def run_benchmarks(bases: Iterable[int], num_bytes: int, csv_path: Optional[str] = None, seed: int = 0) -> pd.DataFrame:
    payload = random_payload(num_bytes, seed)
    rows: List[Dict] = []
    bases = list(bases)
    for base in tqdm(bases, total=len(bases), desc="Benchmark"):
        rows.append(run_single_benchmark(base, payload, csv_path))
    return pd.DataFrame(rows)


if __name__ == "__main__":
    # Arguments: csv_path, num_bytes(int), [base ...]
    if len(sys.argv) < 3:
        print("usage: benchmark_worker.py CSV_PATH NUM_BYTES [BASE ...]")
        sys.exit(1)
    bases = [int(b) for b in sys.argv[3:]] or DEFAULT_BASES
    try:
        df = run_benchmarks(bases, int(sys.argv[2]), sys.argv[1])
    except Exception as e:
        print(f"Worker Error: {e}")
        sys.exit(1)
    print(df.to_string(index=False))
    sys.exit(0)
