import unittest
from array import array
from types import SimpleNamespace

import numpy as np
from numpy.random import uniform
from time import time

from cunone import cunone_by, cunone, to_accessor_array
from cunone.util import add_tqdm

def is_positive(v):
	return v > 0

def is_none(v):
	return v is None

def dummy_data(n):
	return list(uniform(low = -1.0, high = 0.01, size = n))

def _naiive_cunone_by(arr, predicate):
	n = len(arr)
	for i in range(n):
		yield not any(predicate(arr[j]) for j in range(i + 1))

class TestScan(unittest.TestCase):

	@classmethod
	def setUpClass(cls):
		print(f"\n{cls.__name__}")

	def test_generic(self):
		self.assertEqual(cunone_by([-1, -2, 0, 4], is_positive), [True, True, True, False])
		self.assertEqual(cunone_by([-1.0, -2.0, 0.0, 1.0, 1.0], is_positive), [True, True, True, False, False])
		self.assertEqual(cunone_by([True, True, True, True, True], is_positive), [False, False, False, False, False])
		self.assertEqual(cunone_by([{}, None, {}], is_none), [True, False, False])
		self.assertEqual(cunone_by((0, 0, 0), is_positive), [True, True, True])

	def test_numeric(self):
		x = np.array([-1.0, -1.0, -1.0, 1.0, 1.0])
		self.assertEqual(cunone_by(x, is_positive), [True, True, True, False, False])
		x = np.zeros(5)
		self.assertEqual(cunone_by(x, is_positive), [True, True, True, True, True])
		x = np.ones(5)
		self.assertEqual(cunone_by(x, is_positive), [False, False, False, False, False])
		x = array('d', [0.0, 0.0, 1.0])
		self.assertEqual(cunone_by(x, is_positive), [True, True, False])
		x = memoryview(array('d', [-1.0, -2.0, 3.0, 0.0, 1.0]))
		self.assertEqual(cunone_by(x, is_positive), [True, True, False, False, False])

	def test_accessor(self):
		x = to_accessor_array([0, 0, 1, 1, 0])
		self.assertEqual(cunone_by(x, is_positive), [True, True, False, False, False])
		x = to_accessor_array([0, 0, 0, 0, 0])
		self.assertEqual(cunone_by(x, is_positive), [True, True, True, True, True])
		x = to_accessor_array([1, 1, 1, 1, 1])
		self.assertEqual(cunone_by(x, is_positive), [False, False, False, False, False])
		x = to_accessor_array([0, 1, 0])
		self.assertEqual(cunone_by(x, is_positive), [True, False, False])
		x = to_accessor_array(np.array([0.0, 1.0, 0.0, 0.0, 0.0]))
		self.assertEqual(cunone_by(x, is_positive), [True, False, False, False, False])

	def test_empty(self):
		ctx = SimpleNamespace(count = 0)
		def predicate(ctx, v):
			ctx.count += 1
			return v > 0
		self.assertEqual(cunone_by([], is_positive), [])
		self.assertEqual(cunone_by(np.array([]), predicate, ctx), [])
		self.assertEqual(cunone_by(to_accessor_array([]), predicate, ctx), [])
		self.assertEqual(ctx.count, 0)

	def test_context(self):
		ctx = SimpleNamespace(count = 0)
		def predicate(ctx, v):
			ctx.count += 1
			return v > 0
		out = cunone_by([-1, -2, 0, 4], predicate, ctx)
		self.assertEqual(out, [True, True, True, False])
		self.assertEqual(ctx.count, 4)

	def test_short_circuit(self):
		ctx = {"visited": []}
		def predicate(ctx, v, i):
			ctx["visited"].append(i)
			return v > 0
		out = cunone_by(to_accessor_array([0, 0, 1, 1, 0]), predicate, ctx)
		self.assertEqual(out, [True, True, False, False, False])
		self.assertEqual(ctx["visited"], [0, 1, 2])

	def test_predicate_arguments(self):
		x = [0, 0, 0, 0]
		self.assertEqual(cunone_by(x, lambda v, i: i == 2), [True, True, False, False])
		seen = []
		def predicate(v, i, arr):
			seen.append(arr)
			return False
		cunone_by(x, predicate)
		self.assertTrue(all(arr is x for arr in seen))
		self.assertEqual(len(seen), 4)
		self.assertEqual(cunone_by(x, lambda *args: len(args) != 3), [True, True, True, True])
		self.assertEqual(cunone_by([0, 0, 5], bool), [True, True, False])
		self.assertEqual(cunone_by([1, 2, 3], lambda v, threshold = 2: v > threshold), [True, True, False])

	def test_output_is_fresh(self):
		x = [0, 0, 0]
		out = cunone_by(x, is_positive)
		self.assertIsNot(out, x)
		self.assertTrue(all(type(v) is bool for v in out))
		self.assertTrue(all(type(v) is bool for v in cunone_by(np.array([0.0, 1.0]), is_positive)))

	def test_cunone(self):
		self.assertEqual(cunone([0, None, "", 3, 0]), [True, True, True, False, False])
		self.assertEqual(cunone(np.zeros(3)), [True, True, True])
		self.assertEqual(cunone([1, 0, 0], stride = -1), [False, True, True])

	def test_monotonic(self, tries = 20, size = 200):
		for _ in range(tries):
			x = dummy_data(size)
			out = cunone_by(x, is_positive)
			self.assertEqual(len(out), size)
			if False in out:
				first = out.index(False)
				self.assertFalse(any(out[first:]))
				self.assertTrue(all(out[:first]))
			else:
				self.assertTrue(all(out))

	def naiive_cunone_by(self, arr, predicate):
		return list(_naiive_cunone_by(arr, predicate))

	def test_scan(self, tries = 10, size = 2000):
		print(f"\ntest_scan tries={tries} size={size}")
		t_elap_n = 0
		t_elap_c = 0
		for _ in add_tqdm(range(tries),tries):
			x = dummy_data(size)
			t_init_n = time()
			naiive_results = self.naiive_cunone_by(x, is_positive)
			t_elap_n += time() - t_init_n
			t_init_c = time()
			scan_results = cunone_by(x, is_positive)
			t_elap_c += time() - t_init_c
			self.assertEqual(naiive_results, scan_results)
		print(f"\tnaiive scan time (avg)\t{t_elap_n / tries}\n\tcunone scan time (avg)\t{t_elap_c / tries}")

if __name__ == '__main__':
	unittest.main()
