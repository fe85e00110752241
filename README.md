# pedagocrypt

Small, readable implementations of cryptographic building blocks, written for
learning rather than for speed. Nothing here is hardened against side channels;
use it to study how the pieces work, not to protect real data.

The package has no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `pedagocrypt.sha` | `Sha256`, `Sha512` and the shortcuts `sha256(data)`, `sha512(data)` |
| `pedagocrypt.hmac_sha256` | `hmac_sha256(key, message)` and a command-line entry point |
| `pedagocrypt.ghash` | `GHash`, the GCM authentication hash over GF(2^128), and its bit helpers |
| `pedagocrypt.merkle` | `MerkleTree`, `Proof` and `Side` for membership proofs |
| `pedagocrypt.poseidon` | `Poseidon`, `PoseidonConfig` and the abstract `Sponge` interface |
| `pedagocrypt.sponge` | `PoseidonSponge`, `SpongeState` and `SpongeError` |
| `pedagocrypt.polynomial` | `Polynomial` over a prime field, `trim_zeros`, `sum_polynomials` |
| `pedagocrypt.lagrange` | `LagrangePolynomial`, `primitive_root_of_unity`, `dft` |

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Hashing

```python
from pedagocrypt.sha import Sha512, sha256

sha256(b"abc").hex()
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

len(Sha512().digest(b""))
# 64
```

## HMAC-SHA256

```python
from pedagocrypt.hmac_sha256 import hmac_sha256

tag = hmac_sha256(b"secret", b"message")
len(tag)
# 32
```

Keys longer than 64 bytes are hashed first, as HMAC requires.

The same function is available from the shell. The first argument is the key,
the second the message, both taken as UTF-8; the tag is printed in hex after
`Result: `. With fewer than two arguments the command prints a message to
standard error and exits with status 1.

```
pedagocrypt-hmac secret message
```

## GHASH

```python
from pedagocrypt.ghash import GHash

gh = GHash(bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"))
gh.digest(b"", b"").hex()
# '00000000000000000000000000000000'
```

The hash key must be exactly 16 bytes, otherwise `ValueError` is raised.
`field_multiply` multiplies two 128-bit field elements by polynomial
multiplication and reduction; `field_multiply_spec` does the same with the
shift-and-add algorithm of the GCM specification, and the two agree.
`block_to_bits`, `bits_to_bytes` and `bits_from_int` convert between bytes,
integers and bit sequences.

## Merkle trees

```python
from pedagocrypt.merkle import MerkleTree

tree = MerkleTree(["a", "b", "c", "d"])
proof = tree.get_proof(1)
tree.prove("b", proof)   # True
tree.prove("a", proof)   # False
tree.root_hash().hex()
```

Leaves are strings hashed with SHA-256. A level with an odd number of nodes
pairs its last node with itself. An empty leaf list raises `ValueError`, and
`get_proof` raises `IndexError` for an index outside the leaves. `str(tree)`
prints the leaves, each level and the root hash.

## Polynomials

`Polynomial(coefficients, modulus)` keeps a fixed number of coefficients in the
integers modulo a prime, lowest degree first.

```python
from pedagocrypt.polynomial import Polynomial

p = Polynomial([1, 2, 3, 4], 101)
p.evaluate(2)                 # 49
p.degree()                    # 3
p.leading_coefficient()       # 4
p.dft().coefficients          # (10, 79, 99, 18)

q = Polynomial([1, 2, 1], 101) // Polynomial([1, 1], 101)
q.coefficients                # (1, 1, 0)
```

`+` and `-` keep the left operand's number of terms, `*` gives
`len(a) + len(b) - 1` terms, and `//` and `%` keep the dividend's number of
terms. `pow_mult(power, coeff)` multiplies by `coeff * x**power`, `resized`
truncates or pads, and `sum_polynomials` adds a non-empty collection.
Mixing polynomials over different moduli raises `ValueError`.

`dft` returns a `LagrangePolynomial`, whose nodes are the powers of a primitive
root of unity and which evaluates anywhere by barycentric interpolation:

```python
from pedagocrypt.lagrange import dft, primitive_root_of_unity

dft([1, 2, 3, 4], 101).evaluate(2)   # 49
primitive_root_of_unity(3, 101)      # raises ValueError: 3 does not divide 100
```

## Poseidon

`Poseidon(width, alpha, num_p, num_f, round_constants, mds, modulus)` holds a
state of `width` field elements. `hash(state)` pads the input with zeros to the
width, runs the full and partial rounds and returns element 1 of the final
state. `PoseidonConfig` checks its parameters: the width must be above 1, the
MDS matrix `width` by `width`, and there must be `(num_p + num_f) * width`
round constants; otherwise `ValueError` is raised.

`PoseidonSponge` takes the same parameters plus a `rate`. Call
`start_absorbing`, `absorb` any number of element batches, then
`start_squeezing` and `squeeze(n)` as often as needed:

```python
from pedagocrypt.sponge import PoseidonSponge

sponge = PoseidonSponge(width, alpha, num_p, num_f, rate, round_constants, mds, modulus)
sponge.start_absorbing()
sponge.absorb([1, 2, 3])
sponge.start_squeezing()
out = sponge.squeeze(4)
```

Absorbing in several batches gives the same output as absorbing them all at
once. Using the sponge in the wrong phase, such as absorbing after squeezing
has started, raises `SpongeError`; `sponge_state` tells which phase
(`SpongeState.INIT`, `ABSORBING` or `SQUEEZING`) it is in.

## What it does not do

The package covers univariate polynomials only: there are no multivariate
polynomials and no interactive proof protocols built on them. It has no
encryption, signatures, elliptic curves or polynomial commitments, and the only
command it installs is `pedagocrypt-hmac`.