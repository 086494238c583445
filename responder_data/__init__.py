# responder_data: bundled keyword and default response files
import os

DATA_DIR = os.path.dirname(os.path.abspath(__file__))
