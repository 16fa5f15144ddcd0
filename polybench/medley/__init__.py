"""Assorted kernels: Deriche edge detection, Floyd-Warshall and Nussinov."""