"""
Prove that v is in range of [0, 16^4) without revealing the value of v itself
using per-digit Boneh-Boyen signatures (CCS08)
"""

from zkrangeproof import RangeViolationError
from zkrangeproof.ccs08 import Setup, Prover, Verifier, Proof

# the authority signs every digit of base 16 once
params, secret = Setup(16, 4, "BN254").generate()
assert params.validate()

prover = Prover(params)
verifier = Verifier(params)

# secret value v and its commitment blinding
value = 13337
blinding = 0xCAFEBABE

proof = prover.prove(value, blinding)
proof = Proof.from_bytes(proof.to_bytes())

assert verifier.verify(proof, params.public_key)
print(f"Proof is valid: committed value is in range [0, {params.upper_bound})")

# invalid secret value v
value = 16**4 + 1337

try:
    prover.prove(value, blinding)
except RangeViolationError:
    print(f"Proof cannot be produced: {value} is not in range [0, {params.upper_bound})")
