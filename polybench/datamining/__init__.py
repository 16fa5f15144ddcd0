"""Data-mining kernels: correlation and covariance."""