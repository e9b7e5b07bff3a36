# tronkit

Building blocks for working with TRON data from Python:

- `tronkit.address`: Base58Check encoding and decoding, hex and Base64
  conversion, and deriving an address from a secp256k1 public key.
- `tronkit.abi`: ABI type parsing and parameter packing for smart contract
  calls. Addresses are given in Base58, and integers may be passed as
  decimal strings or, for types wider than 64 bits, `0x` hex strings.
- `tronkit.config`: a small YAML settings file that holds the node address,
  ledger use, verbosity, timeout, output format, API key and TLS flag.
- `tronkit.models`: dataclasses for a detailed account view.
- Input parsing and checks for common operations: votes and amounts
  (`tronkit.votes`), account permissions (`tronkit.permissions`), witness
  statistics and brokerage (`tronkit.witnesses`), Bancor exchange trades
  (`tronkit.exchange`), proposal parameters (`tronkit.proposals`) and
  human-readable contract payloads (`tronkit.contracts`).

## Installation

```
pip install tronkit
```

To run the test suite, install the test extra:

```
pip install "tronkit[test]"
pytest
```

## Addresses

```python
from tronkit.address import base58_to_address, AddressError

addr = base58_to_address("TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1")
print(addr)            # Base58Check form
print(addr.hex())      # 0x-prefixed hex form
raw = addr.to_bytes()  # 21 bytes, starting with 0x41

try:
    base58_to_address("not-an-address")
except AddressError as exc:
    print("rejected:", exc)
```

`hex_to_address`, `base64_to_address` and `big_to_address` build an `Address`
from other forms, and `pubkey_to_address` derives one from a 64- or 65-byte
uncompressed public key. `scan_address` accepts only a 21-byte `bytes` value
and raises `AddressError` for anything else.

## ABI parameters

Each parameter is a one-entry mapping from an ABI type to its value:

```python
from tronkit.abi import get_padded_param, load_from_json, pack

encoded = get_padded_param([{"uint256": "43981"}, {"uint256": "0xABCD"}])
assert encoded.hex() == (
    "000000000000000000000000000000000000000000000000000000000000abcd"
    "000000000000000000000000000000000000000000000000000000000000abcd"
)

params = load_from_json('[{"address": "TEvHMZWyfjCAdDJEKYxYVL8rRpigddLC1R"}]')
call_data = pack("transfer(address,uint256)", params + [{"uint256": "1000"}])
```

`pack` puts the four-byte Keccak-256 method selector (`signature`) in front
of the encoded parameters. `parse_type` turns a type name such as
`address[2]` into an `AbiType`. `get_parser` and `get_inputs_parser` return
the output and input `Argument` lists of a named method in a contract ABI.
Invalid types or values raise `AbiError`.

## Configuration

```python
from tronkit.config import init_config, save_config, default_config_dir

config = init_config(default_config_dir())
config.set("node", "node.example.com")   # ":50051" is added when no port is given
config.set("withTLS", "true")
print(config.get("node"))
print(config.get("all"))                  # the whole config as a dict
save_config(config, default_config_dir() / "config.default")
```

`init_config` creates the directory and writes default settings when the
file is missing or holds no node. An unknown parameter name or a value that
is not a boolean where one is expected raises `ConfigError`.

## Parsing operation input

```python
from tronkit.votes import parse_votes, parse_resource_type, trx_to_sun
from tronkit.permissions import parse_permissions
from tronkit.witnesses import witness_productivity, validate_brokerage
from tronkit.exchange import normalize_token, expected_trade_amount
from tronkit.proposals import parse_proposal_params, is_expired

votes = parse_votes(["TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1:100"])
amount = trx_to_sun(1.5)                  # 1 TRX = 1,000,000 sun
resource = parse_resource_type(1)         # ResourceCode.ENERGY

owner, witness, actives = parse_permissions(
    ["O:1:TSvT6Bg3siokv3dbdtt9o4oM1CTXmymGn1-1"],
    ["TransferContract", "VoteWitnessContract"],
)

productivity = witness_productivity(990, 10)
validate_brokerage(20)                    # raises WitnessError outside 0..100

token, sun = normalize_token("TRX", "1.5")   # ("_", 1500000.0)
received = expected_trade_amount("_", sun, "_", 10**9, "1000001", 10**9)

params = parse_proposal_params(["0:100000", "1:2"])
expired = is_expired(0)                   # True: the epoch is in the past
```

`parse_contract_human_readable` in `tronkit.contracts` copies a contract's
fields, writes address fields in Base58 and turns a `Votes` list into a
mapping of witness address to vote count.

Each module raises its own exception (`ParseError`, `WitnessError`,
`ExchangeError`, `ProposalError`) for malformed input.

## What this package does not do

tronkit works on data only. It has no command-line tool, does not connect to
a node, holds no keystore, does not sign or broadcast transactions, and has
no helpers for issuing TRC10 tokens.