"""
Short code generation strategies.
Uses Strategy Pattern so the link service does not care how codes are made.
"""

import secrets
import string
from abc import ABC, abstractmethod


URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "-"


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""
    
    @abstractmethod
    def generate(self) -> str:
        """
        Produce one candidate short code.
        
        Candidates are not guaranteed unique; the link service checks each
        one against the store and asks again on collision.
        """
        pass


class RandomShortCodeStrategy(ShortCodeStrategy):
    """
    Fixed-length random codes from letters, digits and hyphen.
    
    Uses ``secrets`` so codes cannot be predicted from earlier ones.
    With 63 symbols and 8 characters a collision on a small table is
    vanishingly rare.
    """
    
    def __init__(self, length: int = 8, alphabet: str = URL_SAFE_ALPHABET):
        if length < 1:
            raise ValueError("length must be positive")
        self.length = length
        self.alphabet = alphabet
    
    def generate(self) -> str:
        return ''.join(secrets.choice(self.alphabet) for _ in range(self.length))
