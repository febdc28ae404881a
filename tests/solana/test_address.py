from typing import List

import base58
import pytest

from unmint.keys import PublicKey, PrivateKey
from unmint.solana.address import create_program_address, find_program_address, find_program_address_with_bump, \
    InvalidPublicKeyError, MAX_SEED_LENGTH, MAX_SEEDS

_PROGRAM_ID = PublicKey.from_base58('BPFLoader1111111111111111111111111111111111')
# Misspelled in the upstream test vectors the expected addresses were derived from.
_PUBLIC_KEY = base58.b58decode('SeedPubey1111111111111111111111111111111111')


class TestCreateProgramAddress:
    def test_seed_limits(self):
        with pytest.raises(ValueError):
            create_program_address(_PROGRAM_ID, [bytes(MAX_SEED_LENGTH + 1)])

        with pytest.raises(ValueError):
            create_program_address(_PROGRAM_ID, [b'short seed', bytes(MAX_SEED_LENGTH + 1)])

        with pytest.raises(ValueError):
            create_program_address(_PROGRAM_ID, [b'a'] * (MAX_SEEDS + 1))

        assert create_program_address(_PROGRAM_ID, [bytes(MAX_SEED_LENGTH)])

    @pytest.mark.parametrize(
        'expected, seeds',
        [
            ('3gF2KMe9KiC6FNVBmfg9i267aMPvK37FewCip4eGBFcT', [bytes(), bytes([1])]),
            ('7ytmC1nT1xY4RfxCV2ZgyA7UakC93do5ZdyhdF3EtPj7', ['☉'.encode()]),
            ('HwRVBufQ4haG5XSgpspwKtNd3PC9GM9m1196uJW36vds', [b'Talking', b'Squirrels']),
            ('GUs5qLUfsEHkcMB9T38vjr18ypEhRuNWiePW2LoK4E3K', [_PUBLIC_KEY]),
        ]
    )
    def test_known_addresses(self, expected: str, seeds: List[bytes]):
        assert create_program_address(_PROGRAM_ID, seeds).to_base58() == expected

    def test_on_curve(self, mocker):
        on_curve = PrivateKey.random().public_key.raw
        mock_hashlib = mocker.patch('unmint.solana.address.hashlib')
        mock_hashlib.sha256.return_value.digest.return_value = on_curve

        with pytest.raises(InvalidPublicKeyError):
            create_program_address(_PROGRAM_ID, [b'Lil\'', b'Bits'])


class TestFindProgramAddress:
    @pytest.mark.parametrize(
        'program_id, expected',
        [
            ('4uQeVj5tqViQh7yWWGStvkEG1Zmhx6uasJtWCJziofM', 'Bn9pAWUXWc5Kd849xTkQcHqiCbHUEizLFn4r5Cf8XYnd'),
            ('8opHzTAnfzRpPEx21XtnrVTX28YQuCpAjcn1PczScKh', 'oDvUHiiGdMo31xYzjefAzUekWH8EbCKrxgs2FkyTs1S'),
            ('CiDwVBFgWV9E5MvXWoLgnEgn2hK7rJikbvfWavzAQz3', 'B2vBn2bmF9GuaGkebrm8oUqDC34pE6m4bagjNcVE6msv'),
            ('GcdayuLaLyrdmUu324nahyv33G5poQdLUEZ1nEytDeP', '2mN5Nfq9v1EwTV9FPTHPESZ3XiZce9wi5PQoULFuxvev'),
            ('21Z7hRtGQYRi8NocdZzhRuBRt9UZbFXbm1dKYvevp4vB', '9PPbRbNP3rqwzk16r7NDBzk1YDfo9EpWDWSqCYLn5eaF'),
            ('2M59vuWgsiuHAqQVB6KvuXuaBCJR8138gMAm4uCuR6Du', 'E5dLtHAM353EPnHyuZ32sKREn26VW4Y8bzb2KQJTBHQh'),
        ]
    )
    def test_known_addresses(self, program_id, expected):
        actual = find_program_address(PublicKey.from_base58(program_id), [b'Lil\'', b'Bits'])
        assert actual == PublicKey.from_base58(expected)

    def test_bump(self):
        program = PrivateKey.random().public_key
        address, bump = find_program_address_with_bump(program, [b'seed'])

        assert 0 <= bump <= 255
        assert create_program_address(program, [b'seed', bytes([bump])]) == address
        assert find_program_address(program, [b'seed']) == address
