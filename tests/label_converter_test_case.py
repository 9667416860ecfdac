import unittest
import os


class LabelConverterTestCase(unittest.TestCase):
    def __init__(self, *args, **kargs):
        super(LabelConverterTestCase, self).__init__(*args, **kargs)

        root = os.path.dirname(os.path.realpath(__file__))
        self.dataRoot = os.path.join(root, "files")
        self.outputRoot = os.path.join(self.dataRoot, "test_output")

    def setUp(self):
        if not os.path.exists(self.outputRoot):
            os.mkdir(self.outputRoot)
