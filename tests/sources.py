from textwrap import dedent


BUBBLE_SORT = dedent(
	"""
	void bubbleSort(int arr[], int n) {
	  for (int i = 0; i < n - 1; i++) {
	    for (int j = 0; j < n - i - 1; j++) {
	      if (arr[j] > arr[j + 1]) {
	        int temp = arr[j];
	        arr[j] = arr[j + 1];
	        arr[j + 1] = temp;
	      }
	    }
	  }
	}
	"""
)

SUM_ARRAY = dedent(
	"""
	int sum(int arr[], int n) {
	  int total = 0;
	  for (int k = 0; k < n; k++) {
	    total += arr[k];
	  }
	  return total;
	}
	"""
)

TRIPLE_LOOP = dedent(
	"""
	void cube(int n) {
	  for (int a = 0; a < n; a++) {
	    for (int b = 0; b < n; b++) {
	      for (int c = 0; c < n; c++) {
	        work(a, b, c);
	      }
	    }
	  }
	}
	"""
)

BINARY_SEARCH = dedent(
	"""
	int binarySearch(int arr[], int n, int x) {
	  int low = 0, high = n - 1;
	  while (low <= high) {
	    int mid = (low + high) / 2;
	    if (arr[mid] == x) {
	      return mid;
	    } else if (arr[mid] < x) {
	      low = mid + 1;
	    } else {
	      high = mid - 1;
	    }
	  }
	  return -1;
	}
	"""
)

LINEAR_SEARCH = dedent(
	"""
	int linearSearch(int arr[], int n, int x) {
	  for (int i = 0; i < n; i++) {
	    if (arr[i] == x) {
	      return i;
	    }
	  }
	  return -1;
	}
	"""
)

FIBONACCI = dedent(
	"""
	int fib(int n) {
	  if (n <= 1) return n;
	  return fib(n - 1) + fib(n - 2);
	}
	"""
)

HALVING = dedent(
	"""
	int halve(int n) {
	  return halve(n / 2) + n;
	}
	"""
)

ADD = dedent(
	"""
	int add(int a, int b) {
	  return a + b;
	}
	"""
)
