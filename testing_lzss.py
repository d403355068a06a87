import hashlib
import os
import sys
import time
from pathlib import Path

from LZSS import LZSS


class RoundTripTester:
    def __init__(self, results_dir="test_results", window_size=None, verbose=False):
        self.lzss = LZSS(window_size=window_size, verbose=verbose)
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(exist_ok=True)

    def run_test(self, input_path: Path):
        """Run compression and decompression test on a single file"""
        input_path = Path(input_path)
        compressed_path = self.results_dir / f"{input_path.name}.lzss"
        decompressed_path = self.results_dir / f"decompressed_{input_path.name}"
        original_size = os.path.getsize(input_path)

        print(f"\nTesting file: {input_path}")
        print(f"Original size: {original_size / 1024:.2f} KB")

        # Compression
        start_time = time.time()
        log_info = self.lzss.compress_file(
            str(input_path),
            str(compressed_path),
            window_size=self.lzss.window_size,
            verbose=self.lzss.verbose,
        )
        compress_time = time.time() - start_time
        compressed_size = os.path.getsize(compressed_path)
        compression_ratio = (
            (1 - compressed_size / original_size) * 100 if original_size else 0.0
        )

        print(log_info)
        print(f"Compression time: {compress_time:.2f} seconds")

        # Decompression
        start_time = time.time()
        self.lzss.decompress_file(str(compressed_path), str(decompressed_path))
        decompress_time = time.time() - start_time

        print(f"Decompression time: {decompress_time:.2f} seconds")

        success = self._calculate_file_hash(input_path) == self._calculate_file_hash(
            decompressed_path
        )

        if success:
            print("✅ Test passed: Files match")
        else:
            print("❌ Test failed: Files don't match")

        return {
            "file": str(input_path),
            "original_size": original_size,
            "compressed_size": compressed_size,
            "compression_ratio": compression_ratio,
            "compress_time": compress_time,
            "decompress_time": decompress_time,
            "success": success,
        }

    def _calculate_file_hash(self, file_path: Path) -> str:
        """Calculate SHA-256 hash of a file"""
        sha256_hash = hashlib.sha256()
        with open(file_path, "rb") as f:
            for byte_block in iter(lambda: f.read(4096), b""):
                sha256_hash.update(byte_block)
        return sha256_hash.hexdigest()

    def run_all_tests(self, paths):
        """Run tests on every file given, directories are walked one level deep"""
        files = []
        for path in map(Path, paths):
            if path.is_dir():
                files.extend(sorted(p for p in path.iterdir() if p.is_file()))
            elif path.is_file():
                files.append(path)
            else:
                print(f"File not found: {path}")

        results = [self.run_test(file) for file in files]

        print("\nTest Summary:")
        print("=" * 50)
        for result in results:
            status = "✅" if result["success"] else "❌"
            print(f"{status} {result['file']}:")
            print(f"  Original: {result['original_size']/1024:.2f} KB")
            print(f"  Compressed: {result['compressed_size']/1024:.2f} KB")
            print(f"  Ratio: {result['compression_ratio']:.2f}%")
            print(f"  Compress time: {result['compress_time']:.2f}s")
            print(f"  Decompress time: {result['decompress_time']:.2f}s")
            print("-" * 50)
        return results


if __name__ == "__main__":
    tester = RoundTripTester()
    outcome = tester.run_all_tests(sys.argv[1:] or ["test"])
    sys.exit(0 if all(r["success"] for r in outcome) else 1)
