import re
from enum import Enum
from typing import Optional


class ContractLanguage(str, Enum):
    RUST = "rust"
    TYPESCRIPT = "typescript"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContractLanguage"]:
        """Case-insensitive lookup; returns None for unsupported languages."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


# The fence tag must match literally in lower case
FENCE_PATTERNS = {
    ContractLanguage.RUST: re.compile(r"```rust([\s\S]*?)```"),
    ContractLanguage.TYPESCRIPT: re.compile(r"```typescript([\s\S]*?)```"),
}


def extract_code(reply: str, language: ContractLanguage) -> Optional[str]:
    """
    Return the trimmed body of the first fenced block tagged with `language`,
    or None when the reply has no such block (or the block is empty).
    """
    match = FENCE_PATTERNS[language].search(reply or "")
    if not match:
        return None
    code = match.group(1).strip()
    return code or None
