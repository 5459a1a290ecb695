import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from nntextclassifier.model import Characteristic, CharacteristicValue, IncomingCall, Vocabulary

PURCHASE = CharacteristicValue(1, "purchase")
SUPPORT = CharacteristicValue(2, "support")


def intent_characteristic():
    return Characteristic("intent", [PURCHASE, SUPPORT])


def intent_vocabulary():
    return Vocabulary.from_mapping({"buy": 1, "cancel": 2, "refund": 3})


def intent_calls(characteristic=None):
    characteristic = characteristic or intent_characteristic()
    return [
        IncomingCall("please buy now", {characteristic: PURCHASE}),
        IncomingCall("cancel my refund", {characteristic: SUPPORT}),
    ]
