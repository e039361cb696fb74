"""
Symbol Table Decryption
=======================

The ``symp`` table of the SF Symbols fonts is AES-256-CBC encrypted with
PKCS#7 padding under a fixed key and IV. These values are part of the
table format and must stay byte-identical.
"""

import logging

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

logger = logging.getLogger(__name__)

_KEY = bytes.fromhex("B885F69E398CBA7240DB496BE8C61488549F1F885D476B2E2CC114F13B172120")
_IV = bytes.fromhex("EFB0D12EFAC59114C3E5B91270F0C046")

_BLOCK_BITS = algorithms.AES.block_size


def decrypt(ciphertext: bytes) -> bytes | None:
    """
    Decrypt a ``symp`` table payload.

    Args:
        ciphertext: Raw (base64-decoded) table bytes

    Returns:
        Plaintext bytes, or None if the payload cannot be decrypted
    """
    try:
        decryptor = Cipher(algorithms.AES(_KEY), modes.CBC(_IV)).decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as e:
        logger.debug(f"Decryption failed for {len(ciphertext)} byte payload: {e}")
        return None
