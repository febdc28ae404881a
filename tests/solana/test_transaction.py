import base64

import pytest

from unmint.keys import PrivateKey, PublicKey
from unmint.solana.instruction import Instruction, AccountMeta
from unmint.solana.transaction import Transaction, MAX_TX_SIZE, SIGNATURE_LENGTH
from tests.utils import generate_keys

# A single-signer transfer-style transaction produced by the Rust SDK.
_REFERENCE_TX = 'ATMfBMZ8phHEheLph8K9TJhRKhnE4qNZvWiXdUdJRmlTCRsQjWmW2CkQJeRHBCcsqFm2gynjL40M9mTe0Dxp4QIBAAEDfEya6wnC7f3Cv53qnOEywwIJ928rIdqAlfXYI1adXroBAQEEBQYHCAkJCQkJCQkJCQkJCQkJCQkIBwYFBAEBAQICAgQFBgcICQEBAQEBAQEBAQEBAQEBCQgHBgUEAgICAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAABAgIAAQMBAgM='  # noqa: E501


class TestTransaction:
    def test_reference_encoding(self):
        pk = PrivateKey(bytes([48, 83, 2, 1, 1, 48, 5, 6, 3, 43, 101, 112, 4, 34, 4, 32, 255, 101, 36, 24, 124, 23,
                               167, 21, 132, 204, 155, 5, 185, 58, 121, 75]))
        program_id = PublicKey(bytes([2, 2, 2, 4, 5, 6, 7, 8, 9, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 9, 8, 7, 6,
                                      5, 4, 2, 2, 2]))
        to = PublicKey(bytes([1, 1, 1, 4, 5, 6, 7, 8, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 8, 7, 6, 5, 4, 1,
                              1, 1]))

        tx = Transaction.new(
            pk.public_key,
            [Instruction(
                program_id,
                bytes([1, 2, 3]),
                [AccountMeta.new(pk.public_key, True), AccountMeta.new(to, False)],
            )],
        )
        tx.sign([pk])

        generated = base64.b64decode(_REFERENCE_TX)
        assert tx.marshal() == generated
        assert Transaction.unmarshal(generated) == tx

    def test_no_instructions(self):
        payer = generate_keys(1)[0]
        with pytest.raises(ValueError):
            Transaction.new(payer.public_key, [])

    def test_unsigned_roundtrip(self):
        payer, program = generate_keys(2)
        tx = Transaction.new(
            payer.public_key,
            [Instruction(program.public_key, bytes([1, 2, 3]), [AccountMeta.new(payer.public_key, True)])],
        )

        assert not tx.is_signed()
        assert tx.get_signature() is None
        assert Transaction.unmarshal(tx.marshal()) == tx

    def test_invalid_indices(self):
        keys = generate_keys(2)

        def new_tx():
            return Transaction.new(
                keys[0].public_key,
                [Instruction(keys[1].public_key, bytes([1, 2, 3]), [AccountMeta.new(keys[0].public_key, True)])],
            )

        tx = new_tx()
        tx.message.instructions[0].program_index = 2
        with pytest.raises(ValueError):
            Transaction.unmarshal(tx.marshal())

        tx = new_tx()
        tx.message.instructions[0].accounts = bytes([2])
        with pytest.raises(ValueError):
            Transaction.unmarshal(tx.marshal())

    def test_truncated(self):
        payer, program = generate_keys(2)
        tx = Transaction.new(payer.public_key, [Instruction(program.public_key, bytes([1]))])
        b = tx.marshal()

        with pytest.raises(ValueError):
            Transaction.unmarshal(b[:1 + SIGNATURE_LENGTH + 3 + 1 + 10])

    def test_payer_signs_once(self):
        payer, program = generate_keys(2)
        tx = Transaction.new(
            payer.public_key,
            [
                Instruction(program.public_key, bytes([1]), [AccountMeta.new(payer.public_key, True)]),
                Instruction(program.public_key, bytes([2]), [AccountMeta.new_read_only(payer.public_key, True)]),
            ],
        )

        assert len(tx.signatures) == 1
        assert tx.signers == [payer.public_key]
        assert tx.payer == payer.public_key

        tx.sign([payer])
        assert tx.is_signed()
        assert tx.get_signature() == tx.signatures[0]

    def test_duplicate_keys_promoted(self):
        payer, program = generate_keys(2)
        keys = generate_keys(4)
        data = bytes([1, 2, 3])

        tx = Transaction.new(
            payer.public_key,
            [
                Instruction(
                    program.public_key,
                    data,
                    [
                        AccountMeta.new_read_only(keys[0].public_key, True),
                        AccountMeta.new_read_only(keys[1].public_key, False),
                        AccountMeta.new(keys[2].public_key, False),
                        AccountMeta.new(keys[3].public_key, True),
                        # upgraded
                        AccountMeta.new(keys[0].public_key, False),
                        AccountMeta.new_read_only(keys[1].public_key, True),
                        # never downgraded
                        AccountMeta.new_read_only(keys[2].public_key, False),
                        AccountMeta.new_read_only(keys[3].public_key, False),
                    ],
                ),
            ]
        )

        # signing order must not matter
        tx.sign([keys[0], keys[1], keys[3], payer])

        assert len(tx.signatures) == 4
        assert len(tx.message.accounts) == 6
        assert tx.message.header.num_signatures == 4
        assert tx.message.header.num_read_only_signed == 1
        assert tx.message.header.num_read_only == 1

        message = tx.message.marshal()
        for idx, key in enumerate([payer, keys[0], keys[3], keys[1]]):
            key.public_key.verify(message, tx.signatures[idx])

        expected_keys = [payer, keys[0], keys[3], keys[1], keys[2], program]
        assert tx.message.accounts == [k.public_key for k in expected_keys]

        assert tx.message.instructions[0].program_index == 5
        assert tx.message.instructions[0].data == data
        assert tx.message.instructions[0].accounts == bytes([1, 3, 4, 2, 1, 3, 4, 2])

    def test_multi_instruction_ordering(self):
        payer, program, program2 = generate_keys(3)
        keys = generate_keys(6)

        tx = Transaction.new(
            payer.public_key,
            [
                Instruction(
                    program.public_key,
                    bytes([1, 2, 3]),
                    [
                        AccountMeta.new_read_only(keys[0].public_key, True),
                        AccountMeta.new_read_only(keys[1].public_key, False),
                        AccountMeta.new(keys[2].public_key, False),
                        AccountMeta.new(keys[3].public_key, True),
                    ],
                ),
                Instruction(
                    program2.public_key,
                    bytes([3, 4, 5]),
                    [
                        AccountMeta.new_read_only(keys[3].public_key, False),
                        AccountMeta.new_read_only(keys[2].public_key, False),
                        AccountMeta.new(keys[0].public_key, False),
                        AccountMeta.new(keys[1].public_key, True),
                        AccountMeta.new(keys[4].public_key, True),
                        AccountMeta.new_read_only(keys[5].public_key, False),
                    ],
                ),
            ]
        )

        tx.sign([payer, keys[0], keys[1], keys[3], keys[4]])

        assert tx.message.header.num_signatures == 5
        assert tx.message.header.num_read_only_signed == 0
        assert tx.message.header.num_read_only == 3

        expected_keys = [payer, keys[0], keys[1], keys[3], keys[4], keys[2], keys[5], program, program2]
        assert tx.message.accounts == [k.public_key for k in expected_keys]

        assert tx.message.instructions[0].program_index == 7
        assert tx.message.instructions[0].accounts == bytes([1, 2, 5, 3])
        assert tx.message.instructions[1].program_index == 8
        assert tx.message.instructions[1].accounts == bytes([3, 5, 1, 2, 4, 6])

    def test_sign_unknown_account(self):
        payer, program, other = generate_keys(3)
        tx = Transaction.new(payer.public_key, [Instruction(program.public_key, bytes([1]))])

        with pytest.raises(ValueError):
            tx.sign([other])

        # the program is an account, but not a signer
        with pytest.raises(ValueError):
            tx.sign([program])

    def test_set_blockhash(self):
        payer, program = generate_keys(2)
        tx = Transaction.new(payer.public_key, [Instruction(program.public_key, bytes([1]))])

        tx.set_blockhash(bytes(range(32)))
        assert Transaction.unmarshal(tx.marshal()).message.recent_blockhash == bytes(range(32))

        with pytest.raises(ValueError):
            tx.set_blockhash(bytes(31))

    def test_too_large(self):
        payer, program = generate_keys(2)
        tx = Transaction.new(payer.public_key, [Instruction(program.public_key, bytes(MAX_TX_SIZE))])

        with pytest.raises(ValueError):
            tx.marshal()
