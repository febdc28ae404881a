import argparse
import logging

from unmint.client import Client, Environment, TransferOptions
from unmint.error import Error, SubmissionRejectedError
from unmint.keys import load
from unmint.solana.token import TokenProgramVariant

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ap = argparse.ArgumentParser()
ap.add_argument('-s', '--sender', required=True, help='The base58-encoded secret of the sender account')
ap.add_argument('-d', '--destination', required=True, help='The public address of the destination wallet')
ap.add_argument('-m', '--mint', required=True, help='The public address of the token mint')
ap.add_argument('-a', '--amount', default='1', help='The amount of tokens to send')
ap.add_argument('-f', '--fee-payer', help='The base58-encoded secret of the account paying the fee (optional)')
ap.add_argument('--extensions', action='store_true', help='Use the Token-2022 program')
ap.add_argument('--devnet', action='store_true', help='Send on devnet instead of mainnet')
args = vars(ap.parse_args())

client = Client(
    Environment.DEVNET if args['devnet'] else Environment.MAINNET,
    token_program=TokenProgramVariant.EXTENSIONS if args['extensions'] else TokenProgramVariant.LEGACY,
)

sender = load(args['sender'])
options = TransferOptions(fee_payer=load(args['fee_payer']) if args['fee_payer'] else None)

try:
    balance = client.balance(sender, args['mint'])
    logger.info(f'sender balance: {balance.ui_amount_string}')

    tx_id = client.send_token(sender, args['destination'], args['mint'], args['amount'], options=options)
    logger.info(f'transaction successfully submitted with signature: {tx_id}')
except SubmissionRejectedError as e:
    logger.error(f'transaction {e.tx_id} was rejected: {e.message}')
except Error as e:
    logger.error(f'transfer failed: {repr(e)}')
