
import sys
import time
import psutil
import os
import threading
from typing import Optional

import pandas as pd

from alphabet import alphabet_of_size
from basin_codec import BasinDecoder, BasinEncoder
from benchmark_worker import random_payload


def run_stress_test(base: int, num_bytes: int, output_csv: Optional[str] = None,
                    interval: float = 0.1, seed: int = 0) -> pd.DataFrame:
    """
    Encode and decode a large random payload while sampling this process's RSS.
    Returns the memory log; it is also written to output_csv when given.
    """
    # --- 1. SETUP MONITORING ---
    memory_log = []
    stop_monitor = threading.Event()
    process = psutil.Process(os.getpid())
    start_time = time.time()
    phase = {"name": "setup"}

    def sample():
        # RSS = Resident Set Size (Physical RAM) in MB
        mem_mb = process.memory_info().rss / (1024 * 1024)
        elapsed = time.time() - start_time
        memory_log.append({"time": elapsed, "phase": phase["name"], "memory_mb": mem_mb})

    def monitor():
        while not stop_monitor.is_set():
            sample()
            stop_monitor.wait(interval)

    monitor_thread = threading.Thread(target=monitor, daemon=True)
    monitor_thread.start()

    # --- 2. RUN ---
    try:
        alphabet = alphabet_of_size(base)
        payload = random_payload(num_bytes, seed)

        phase["name"] = "encode"
        encoded = BasinEncoder(alphabet=alphabet).encode(payload)

        phase["name"] = "decode"
        decoded = BasinDecoder(alphabet=alphabet).decode_bytes(encoded)
        if decoded != payload:
            raise RuntimeError(f"round trip failed for base {base} at {num_bytes} bytes")
        phase["name"] = "done"
    finally:
        stop_monitor.set()
        monitor_thread.join()
        # at least one sample even for runs shorter than the interval
        sample()

    # --- 3. SAVE MEMORY LOG ---
    df = pd.DataFrame(memory_log)
    if output_csv is not None:
        df.to_csv(output_csv, index=False)
    return df


if __name__ == "__main__":
    # Arguments: base(int), num_bytes(int), output_csv
    if len(sys.argv) >= 4:
        try:
            log = run_stress_test(int(sys.argv[1]), int(sys.argv[2]), sys.argv[3])
        except Exception as e:
            print(f"Worker Error: {e}")
            sys.exit(1)
        print(f"peak_memory_mb={log['memory_mb'].max():.1f}")
        sys.exit(0)
    sys.exit(1)
