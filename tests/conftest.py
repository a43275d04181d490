"""Shared PKGBUILD fixtures."""

import pytest

CANONICAL = """\
# Maintainer: Jane Doe <jane@example.org>

pkgname=hello
pkgver=2.12.1
pkgrel=1
pkgdesc="GNU Hello prints a friendly greeting"
arch=(x86_64)
url="https://www.gnu.org/software/hello/"
license=("GPL3")
depends=("glibc")
makedepends=("gcc" "make")
source=("https://ftp.gnu.org/gnu/hello/hello-$pkgver.tar.gz"
        "hello.patch")
sha256sums=("8d99142afd92576f30b0cd7cb42a8dc6809998bc5d607d88761f512e26c7db20"
            "SKIP")
_commit="abc123"

prepare() {
  cd "$srcdir/hello-$pkgver"
  patch -p1 < ../hello.patch
}

build() {
  cd "$srcdir/hello-$pkgver"
  ./configure --prefix=/usr
  make
}

package() {
  cd "$srcdir/hello-$pkgver"
  make DESTDIR="$pkgdir" install
}
"""

MESSY = """\
# Maintainer: Jane Doe <jane@example.org>

pkgrel=1
pkgver=2.12.1
pkgname='hello'
_commit=abc123
pkgdesc='GNU Hello prints a friendly greeting'
arch=('x86_64')
url='https://www.gnu.org/software/hello/'
license=('GPL3')
makedepends=(gcc   make)
depends=(glibc)
sha256sums=('8d99142afd92576f30b0cd7cb42a8dc6809998bc5d607d88761f512e26c7db20' 'SKIP')
source=("https://ftp.gnu.org/gnu/hello/hello-$pkgver.tar.gz"
  hello.patch
)

package() {
  cd "$srcdir/hello-$pkgver"
  make DESTDIR="$pkgdir" install
}

build() {
  cd "$srcdir/hello-$pkgver"
  ./configure --prefix=/usr
  make
}

prepare() {
  cd "$srcdir/hello-$pkgver"
  patch -p1 < ../hello.patch
}
"""


@pytest.fixture
def canonical_text():
    return CANONICAL


@pytest.fixture
def messy_text():
    return MESSY
