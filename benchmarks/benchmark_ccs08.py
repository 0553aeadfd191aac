from zkrangeproof.ccs08 import Setup, Prover, Verifier
from zkrangeproof.utils import Timer


def run(u, l, curve="BN254"):

    with Timer(f"[{curve}] setup u={u} l={l}"):
        params, _ = Setup(u, l, curve).generate()

    with Timer(f"[{curve}] prove u={u} l={l}"):
        proof = Prover(params).prove(u**l - 1, 1337)

    with Timer(f"[{curve}] verify u={u} l={l}"):
        assert Verifier(params).verify(proof)

    print(f"[{curve}] proof size: {len(proof.to_bytes())} bytes")


if __name__ == "__main__":
    for u, l in ((2, 32), (16, 8), (256, 4)):
        run(u, l)

    run(16, 8, "BLS12_381")
