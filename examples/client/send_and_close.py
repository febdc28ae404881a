import argparse
import logging

from unmint.client import Client, Environment, TransferOptions
from unmint.error import AccountNotFoundError, Error
from unmint.keys import PublicKey, load
from unmint.solana.token import TokenProgramVariant

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ap = argparse.ArgumentParser()
ap.add_argument('-s', '--sender', required=True, help='The base58-encoded secret of the sender account')
ap.add_argument('-d', '--destination', required=True, help='The public address of the destination wallet')
ap.add_argument('-m', '--mint', required=True, help='The public address of the token mint')
ap.add_argument('-r', '--rent-recipient', help='The address receiving the reclaimed rent (optional)')
ap.add_argument('--max-only', action='store_true', help='Send the full balance without closing the account')
ap.add_argument('--extensions', action='store_true', help='Use the Token-2022 program')
ap.add_argument('--devnet', action='store_true', help='Send on devnet instead of mainnet')
args = vars(ap.parse_args())

client = Client(
    Environment.DEVNET if args['devnet'] else Environment.MAINNET,
    token_program=TokenProgramVariant.EXTENSIONS if args['extensions'] else TokenProgramVariant.LEGACY,
)

sender = load(args['sender'])
rent_recipient = PublicKey.from_base58(args['rent_recipient']) if args['rent_recipient'] else None
options = TransferOptions(rent_recipient=rent_recipient)

try:
    if args['max_only']:
        tx_id = client.send_max_token(sender, args['destination'], args['mint'], options=options)
    else:
        tx_id = client.send_and_close(sender, args['destination'], args['mint'], options=options)
    logger.info(f'transaction successfully submitted with signature: {tx_id}')
except AccountNotFoundError:
    logger.error(f'{sender.public_key} has no token account for mint {args["mint"]}')
except Error as e:
    logger.error(f'transfer failed: {repr(e)}')
