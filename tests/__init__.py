# -*- coding: utf-8 -*-
import testdata
from testdata import TestCase
