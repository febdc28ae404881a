import argparse
import logging

from unmint.client import Client, Environment
from unmint.error import AccountNotFoundError
from unmint.solana.token import TokenProgramVariant
from unmint.utils import lamports_to_sol

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ap = argparse.ArgumentParser()
ap.add_argument('-o', '--owner', required=True, help='The public address of the wallet')
ap.add_argument('-m', '--mint', help='The public address of the token mint (optional)')
ap.add_argument('--extensions', action='store_true', help='Use the Token-2022 program')
ap.add_argument('--devnet', action='store_true', help='Query devnet instead of mainnet')
args = vars(ap.parse_args())

client = Client(
    Environment.DEVNET if args['devnet'] else Environment.MAINNET,
    token_program=TokenProgramVariant.EXTENSIONS if args['extensions'] else TokenProgramVariant.LEGACY,
)

logger.info(f'SOL balance: {lamports_to_sol(client.balance_sol(args["owner"]))}')

if args['mint']:
    try:
        balance = client.balance(args['owner'], args['mint'])
        logger.info(f'token balance: {balance.ui_amount_string} ({balance.amount} at {balance.decimals} decimals)')
    except AccountNotFoundError:
        logger.info(f'no token account found at {client.get_associated_account(args["owner"], args["mint"])}')
