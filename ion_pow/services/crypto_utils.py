from argon2.low_level import Type, hash_secret_raw

# Argon2id parameters the anchoring service verifies answers with
ANSWER_HASH_ITERATIONS = 1
ANSWER_HASH_PARALLELISM = 1
ANSWER_HASH_MEMORY_COST = 1000  # KiB
ANSWER_HASH_LENGTH = 32


def argon2id_hex(
    password: bytes,
    salt: bytes,
    *,
    iterations: int = ANSWER_HASH_ITERATIONS,
    parallelism: int = ANSWER_HASH_PARALLELISM,
    memory_cost: int = ANSWER_HASH_MEMORY_COST,
    hash_length: int = ANSWER_HASH_LENGTH,
) -> str:
    """Hash password with Argon2id and return the raw digest as lowercase hex."""
    digest = hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=iterations,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=hash_length,
        type=Type.ID,
    )
    return digest.hex()
