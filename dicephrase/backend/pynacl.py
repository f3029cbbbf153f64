import nacl.utils

# libsodium randombytes_buf
randombytes = nacl.utils.random
