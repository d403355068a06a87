from abc import ABC, abstractmethod
import mmap
import os
from typing import Optional, Tuple

from errors import DecodeResult, DecodeStatus


class Compressor(ABC):
    """
    Інтерфейс, що описує операції стиснення та розпакування
    для контейнерних форматів.

    compress() may decline an input (returns None); the helpers below then
    store the input raw, and on the way back pass raw data through.
    """

    @abstractmethod
    def compress(self, data: bytes) -> Optional[bytes]:
        """
        Стискає байти.

        Args:
            data: Вхідні дані

        Returns:
            Стиснений контейнер або None, якщо стискати не варто
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> DecodeResult:
        """
        Розпаковує контейнер.

        Args:
            data: Стиснений контейнер

        Returns:
            DecodeResult зі статусом і даними (дані лише при успіху)
        """
        pass

    def decompress(self, data: bytes) -> Optional[bytes]:
        return self.decode(data).data

    def _pack(self, data: bytes) -> Tuple[bytes, str]:
        packed = self.compress(data)
        if packed is None:
            return bytes(data), f"Stored {len(data)} bytes uncompressed"
        ratio = (1 - len(packed) / len(data)) * 100
        return packed, (
            f"Compressed {len(data)} -> {len(packed)} bytes "
            f"(compression ratio {ratio:.2f}%)"
        )

    def _unpack(self, data: bytes) -> Tuple[bytes, str]:
        result = self.decode(data)
        if result.status is DecodeStatus.NOT_A_CONTAINER:
            return bytes(data), f"Copied {len(data)} stored bytes"
        result.raise_for_status()
        return result.data, f"Decompressed {len(data)} -> {len(result.data)} bytes"

    @staticmethod
    def _apply_to_file(func, input_file: str, output_file: str) -> str:
        if os.path.getsize(input_file) == 0:
            payload, log_info = func(b"")
        else:
            with open(input_file, "rb") as f, mmap.mmap(
                f.fileno(), length=0, access=mmap.ACCESS_READ
            ) as buf:
                payload, log_info = func(buf)
        with open(output_file, "wb") as out_file:
            out_file.write(payload)
        return f"{input_file} -> {output_file}: {log_info}"

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Допоміжний метод для стиснення файлу.

        Args:
            input_file: Шлях до вхідного файлу
            output_file: Шлях до вихідного файлу
            **kwargs: Параметри конструктора компресора

        Returns:
            Інформація про стиснення
        """
        compressor = cls(**kwargs)
        return cls._apply_to_file(compressor._pack, input_file, output_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **kwargs) -> str:
        """
        Допоміжний метод для розпакування файлу.
        Пошкоджений контейнер піднімає LZSSError.

        Args:
            input_file: Шлях до стисненого файлу
            output_file: Шлях до вихідного файлу
            **kwargs: Параметри конструктора компресора

        Returns:
            Інформація про розпакування
        """
        compressor = cls(**kwargs)
        return cls._apply_to_file(compressor._unpack, input_file, output_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Допоміжний метод для стиснення байтів.

        Returns:
            Кортеж (стиснені або збережені як є дані, інформація про стиснення)
        """
        return cls(**kwargs)._pack(data)

    @classmethod
    def decompress_bytes(cls, data: bytes, **kwargs) -> Tuple[bytes, str]:
        """
        Допоміжний метод для розпакування байтів.

        Returns:
            Кортеж (розпаковані дані, інформація про розпакування)
        """
        return cls(**kwargs)._unpack(data)
